from typing import Any, Dict
from urllib.parse import parse_qsl, urlparse

from . import base32 as base32
from .authenticator import Authenticator as Authenticator
from .clock import Clock as Clock
from .clock import FixedClock as FixedClock
from .clock import SystemClock as SystemClock
from .config import AuthenticatorConfig as AuthenticatorConfig
from .config import check_digits, check_period
from .exceptions import AuthenticatorException as AuthenticatorException
from .exceptions import InvalidParameter as InvalidParameter
from .exceptions import InvalidSecret as InvalidSecret
from .exceptions import RandomSourceUnavailable as RandomSourceUnavailable
from .otp import compute_code as compute_code
from .secret import RandomSource as RandomSource
from .secret import SystemRandomSource as SystemRandomSource
from .secret import create_secret as create_secret
from .totp import timecode as timecode
from .totp import verify_code as verify_code
from .utils import ProvisioningParameters as ProvisioningParameters
from .utils import build_uri as build_uri


def parse_uri(uri: str) -> ProvisioningParameters:
    """
    Parses a TOTP provisioning URI, the reverse of :func:`build_uri`.

    The label is returned exactly as it appears in the path, without
    percent-decoding, since :func:`build_uri` writes it there unchanged.
    Absent ``digits`` and ``period`` mean the defaults.

    See also:
        https://github.com/google/google-authenticator/wiki/Key-Uri-Format

    :param uri: the otpauth URI to parse
    :returns: the provisioning parameters
    """
    secret = None
    otp_data: Dict[str, Any] = {}

    parsed_uri = urlparse(uri)

    if parsed_uri.scheme != "otpauth":
        raise InvalidParameter("Not an otpauth URI")
    if parsed_uri.netloc != "totp":
        raise InvalidParameter("Not a supported OTP type")

    otp_data["label"] = parsed_uri.path[1:]
    otp_data["issuer"] = ""

    for key, value in parse_qsl(parsed_uri.query):
        if key == "secret":
            secret = value
        elif key == "issuer":
            otp_data["issuer"] = value
        elif key == "digits":
            otp_data["digits"] = check_digits(_to_int(key, value))
        elif key == "period":
            otp_data["period"] = check_period(_to_int(key, value))

    if not secret:
        raise InvalidSecret("No secret found in URI")
    base32.check_secret(secret)

    return ProvisioningParameters(secret, **otp_data)


def _to_int(key: str, value: str) -> int:
    try:
        return int(value)
    except ValueError as exc:
        raise InvalidParameter("Invalid value for {}: {!r}".format(key, value)) from exc
