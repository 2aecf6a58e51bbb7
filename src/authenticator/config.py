import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .exceptions import InvalidParameter

DEFAULT_DIGITS = 6
DEFAULT_PERIOD = 30
ALLOWED_DIGITS = (6, 8)
MIN_PERIOD = 15
MAX_PERIOD = 60


def check_digits(digits: int) -> int:
    # bool is an int subclass, reject it explicitly
    if isinstance(digits, bool) or not isinstance(digits, int) or digits not in ALLOWED_DIGITS:
        raise InvalidParameter("Invalid code length: {!r}, must be 6 or 8".format(digits))
    return digits


def check_period(period: int) -> int:
    if isinstance(period, bool) or not isinstance(period, int) or not MIN_PERIOD <= period <= MAX_PERIOD:
        raise InvalidParameter(
            "Invalid period: {!r}, must be between {} and {} seconds".format(period, MIN_PERIOD, MAX_PERIOD)
        )
    return period


@dataclass(frozen=True)
class AuthenticatorConfig:
    """
    Code length and time step size shared by every operation of an
    :class:`~authenticator.Authenticator`.

    Instances are immutable; build a new one (``dataclasses.replace``) to
    change a value.

    :param digits: length of generated codes, 6 or 8
    :param period: seconds per time step, 15 to 60
    """

    digits: int = DEFAULT_DIGITS
    period: int = DEFAULT_PERIOD

    def __post_init__(self) -> None:
        check_digits(self.digits)
        check_period(self.period)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, prefix: str = "AUTHENTICATOR_") -> "AuthenticatorConfig":
        """
        Builds a configuration from ``<prefix>DIGITS`` and ``<prefix>PERIOD``.

        Unset or blank variables fall back to the defaults.

        :param environ: mapping to read from, defaults to ``os.environ``
        :param prefix: variable name prefix
        :returns: validated configuration
        """
        if environ is None:
            environ = os.environ
        return cls(
            digits=_read_int(environ, prefix + "DIGITS", DEFAULT_DIGITS),
            period=_read_int(environ, prefix + "PERIOD", DEFAULT_PERIOD),
        )


def _read_int(environ: Mapping[str, str], key: str, default: int) -> int:
    raw = environ.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise InvalidParameter("{} must be an integer, got {!r}".format(key, raw)) from exc


DEFAULT_CONFIG = AuthenticatorConfig()
