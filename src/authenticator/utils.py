import logging
import unicodedata
from dataclasses import dataclass
from hmac import compare_digest
from typing import Dict, Union
from urllib.parse import urlencode

from . import base32
from .config import DEFAULT_DIGITS, DEFAULT_PERIOD, check_digits, check_period

logger = logging.getLogger(__name__)


def build_uri(
    secret: str,
    label: str,
    issuer: str,
    digits: int = DEFAULT_DIGITS,
    period: int = DEFAULT_PERIOD,
) -> str:
    """
    Returns the provisioning URI for a TOTP secret.

    This can then be encoded in a QR Code and used to provision an
    authenticator app.

    See also:
        https://github.com/google/google-authenticator/wiki/Key-Uri-Format

    :param secret: secret over the RFC 3548 alphabet
    :param label: account label, put into the path as given; may use the
        ``Issuer:account`` convention
    :param issuer: the name of the OTP issuer; this will be the
        organization title of the entry in the authenticator app
    :param digits: the length of the generated codes
    :param period: the number of seconds each code stays valid
    :returns: provisioning uri
    """
    base32.check_secret(secret)
    check_digits(digits)
    check_period(period)

    url_args: Dict[str, Union[int, str]] = {"secret": secret, "issuer": issuer}

    # Scanners assume the defaults when the parameters are absent
    if digits != DEFAULT_DIGITS:
        url_args["digits"] = digits
    if period != DEFAULT_PERIOD:
        url_args["period"] = period

    uri = "otpauth://totp/{0}?{1}".format(label, urlencode(url_args).replace("+", "%20"))
    logger.debug("Built provisioning uri for issuer %r", issuer)
    return uri


def _comparable(value: str) -> bytes:
    # lone surrogates (e.g. from surrogateescape-decoded input) must still encode
    return unicodedata.normalize("NFKC", value).encode("utf-8", "surrogatepass")


def strings_equal(candidate: str, expected: str) -> bool:
    """
    Compares a user supplied code with the expected one in constant time.

    Both sides are NFKC-normalised first, so fullwidth digits match their
    ASCII form. Only the lengths can leak through timing.
    """
    return compare_digest(_comparable(candidate), _comparable(expected))


@dataclass(frozen=True)
class ProvisioningParameters:
    """
    Everything needed to provision an authenticator app with a secret.
    """

    secret: str
    label: str
    issuer: str
    digits: int = DEFAULT_DIGITS
    period: int = DEFAULT_PERIOD

    def to_uri(self) -> str:
        return build_uri(self.secret, self.label, self.issuer, digits=self.digits, period=self.period)
