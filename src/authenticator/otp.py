import hashlib
import hmac
import struct

from . import base32
from .config import DEFAULT_DIGITS, check_digits
from .exceptions import InvalidParameter


def check_time_step(time_step: int) -> int:
    if isinstance(time_step, bool) or not isinstance(time_step, int) or time_step < 0:
        raise InvalidParameter("time step must be a non-negative integer, got {!r}".format(time_step))
    return time_step


def int_to_bytestring(i: int) -> bytes:
    """
    Turns a time step into the 8 byte big-endian counter fed to the HMAC.

    The high 4 bytes are always zero; only the low 32 bits of the counter
    are kept.
    """
    return struct.pack(">II", 0, i & 0xFFFFFFFF)


def dynamic_truncate(hmac_hash: bytes) -> int:
    """
    RFC 4226 dynamic truncation: the low nibble of the last byte picks the
    offset of a 4 byte big-endian word, whose sign bit is then cleared.
    """
    offset = hmac_hash[-1] & 0xF
    return struct.unpack(">I", hmac_hash[offset : offset + 4])[0] & 0x7FFFFFFF


def compute_code(secret: str, time_step: int, digits: int = DEFAULT_DIGITS) -> str:
    """
    Calculates the code for the given secret and time step.

    Implements HOTP (RFC 4226) with HMAC-SHA1; with
    ``time_step = floor(unix_time / period)`` this is TOTP (RFC 6238).

    :param secret: secret over the RFC 3548 alphabet
    :param time_step: non-negative counter value
    :param digits: code length, 6 or 8
    :returns: zero-padded decimal code of exactly ``digits`` characters
    :raises InvalidParameter: if digits or time_step are out of bounds
    :raises InvalidSecret: if the secret has characters outside the alphabet
    """
    check_digits(digits)
    check_time_step(time_step)
    base32.check_secret(secret)

    hasher = hmac.new(base32.decode(secret), int_to_bytestring(time_step), hashlib.sha1)
    code = dynamic_truncate(hasher.digest()) % 10**digits
    return str(code).zfill(digits)
