import base64
import re
from typing import Any

from .exceptions import InvalidSecret

# RFC 3548, no padding character
ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"

_SECRET_CHARS = re.compile(r"[{}]+".format(ALPHABET))

# Longest decodable prefix for each count of characters left over after the
# last full 8-character block. 1, 3 and 6 leftovers only carry spare bits.
_USABLE_TAIL = {0: 0, 1: 0, 2: 2, 3: 2, 4: 4, 5: 5, 6: 5, 7: 7}


def alphabet() -> str:
    return ALPHABET


def encode(data: bytes) -> str:
    """
    RFC 4648 Base32 encoding without the trailing ``=`` padding.
    """
    return base64.b32encode(data).decode("ascii").rstrip("=")


def decode(value: str) -> bytes:
    """
    Decodes an unpadded RFC 4648 Base32 string into raw bytes.

    The otpauth scheme does not pad secrets whose length is not a multiple of
    8, so padding is added back here. A trailing group too short to fill a
    whole byte contributes nothing, the same way a bit-buffer decoder would
    drop it.

    :param value: Base32 string, upper case, no padding
    :returns: decoded bytes
    """
    value = value.rstrip("=")
    full_blocks, tail = divmod(len(value), 8)
    value = value[: full_blocks * 8 + _USABLE_TAIL[tail]]
    missing_padding = len(value) % 8
    if missing_padding != 0:
        value += "=" * (8 - missing_padding)
    try:
        return base64.b32decode(value)
    except ValueError as exc:
        # binascii.Error for foreign characters, plain ValueError for non-ASCII
        raise InvalidSecret("Invalid secret phrase!") from exc


def is_valid_secret(secret: Any) -> bool:
    return isinstance(secret, str) and _SECRET_CHARS.fullmatch(secret) is not None


def check_secret(secret: Any) -> str:
    """
    Makes sure the secret is a non-empty string over :data:`ALPHABET`.

    :raises InvalidSecret: on any other input
    """
    if not is_valid_secret(secret):
        raise InvalidSecret("Invalid secret phrase!")
    return secret
