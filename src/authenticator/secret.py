import logging
import secrets
from typing import Optional, Protocol

from .base32 import ALPHABET
from .exceptions import InvalidParameter, RandomSourceUnavailable

logger = logging.getLogger(__name__)

DEFAULT_SECRET_LENGTH = 16
MIN_SECRET_LENGTH = 10
MAX_SECRET_LENGTH = 80


class RandomSource(Protocol):
    """
    Anything with a ``next_bytes(n)`` method returning ``n`` secure random
    bytes, raising rather than returning predictable output.
    """

    def next_bytes(self, n: int) -> bytes:
        ...


class SystemRandomSource(object):
    """
    Cryptographically secure bytes from the operating system.
    """

    def next_bytes(self, n: int) -> bytes:
        try:
            return secrets.token_bytes(n)
        except (OSError, NotImplementedError) as exc:
            logger.warning("System random source failed: %s", exc)
            raise RandomSourceUnavailable("No secure random source available") from exc


system_random = SystemRandomSource()


def create_secret(byte_length: int = DEFAULT_SECRET_LENGTH, random_source: Optional[RandomSource] = None) -> str:
    """
    Generates a new random secret over the RFC 3548 alphabet.

    Every random byte becomes one character, picked by its 5 low bits
    (``byte & 31``). The result is NOT the RFC 4648 encoding of the random
    bytes, and decoding it then encoding it again does not give it back.
    Secrets already handed out depend on this mapping, keep it.

    :param byte_length: number of random bytes to draw, 10 to 80; this is
        also the length of the returned string
    :param random_source: object with a ``next_bytes(n)`` method, defaults
        to the operating system source
    :returns: secret string
    """
    if isinstance(byte_length, bool) or not isinstance(byte_length, int):
        raise InvalidParameter("Invalid secret length: {!r}".format(byte_length))
    if byte_length < MIN_SECRET_LENGTH or byte_length > MAX_SECRET_LENGTH:
        raise InvalidParameter("Invalid secret length: {}".format(byte_length))

    source = random_source if random_source is not None else system_random
    random = source.next_bytes(byte_length)
    if len(random) < byte_length:
        # a short read is as bad as no read
        raise RandomSourceUnavailable("Random source returned {} of {} bytes".format(len(random), byte_length))

    secret = "".join(ALPHABET[b & 31] for b in random[:byte_length])
    logger.debug("Created secret of length %d", byte_length)
    return secret
