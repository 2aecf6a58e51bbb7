import datetime
from typing import Optional, Union

from . import otp, totp, utils
from .clock import Clock, system_clock
from .config import DEFAULT_CONFIG, AuthenticatorConfig
from .secret import DEFAULT_SECRET_LENGTH, RandomSource, create_secret


class Authenticator(object):
    """
    Google Authenticator compatible TOTP handler.

    Holds no per-user state: the secret is passed to every call. The
    configuration, clock and random source are fixed at construction, so one
    instance can be shared between threads.

        >>> auth = Authenticator(AuthenticatorConfig(digits=8))
        >>> key = auth.create_secret()
        >>> auth.verify_code(auth.get_code(key), key)
        True
    """

    def __init__(
        self,
        config: Optional[AuthenticatorConfig] = None,
        clock: Optional[Clock] = None,
        random_source: Optional[RandomSource] = None,
    ) -> None:
        self._config = config or DEFAULT_CONFIG
        self._clock = clock or system_clock
        self._random_source = random_source

    @property
    def config(self) -> AuthenticatorConfig:
        return self._config

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def random_source(self) -> Optional[RandomSource]:
        return self._random_source

    @property
    def digits(self) -> int:
        return self.config.digits

    @property
    def period(self) -> int:
        return self.config.period

    def create_secret(self, length: int = DEFAULT_SECRET_LENGTH) -> str:
        """
        :param length: number of random bytes, and characters, in the secret
        :returns: new secret
        """
        return create_secret(length, random_source=self.random_source)

    def timecode(self, for_time: Union[int, float, datetime.datetime, None] = None) -> int:
        """
        :param for_time: Unix timestamp or datetime, defaults to the clock's now
        :returns: the time step for ``for_time``
        """
        if for_time is None:
            for_time = self.clock.time()
        return totp.timecode(for_time, self.period)

    def get_code(self, secret: str, time_step: Optional[int] = None) -> str:
        """
        Calculates the code for the secret at a time step, the current one
        by default.
        """
        if time_step is None:
            time_step = self.timecode()
        return otp.compute_code(secret, time_step, self.digits)

    def verify_code(
        self, code: str, secret: str, time_step: Optional[int] = None, window: int = totp.DEFAULT_WINDOW
    ) -> bool:
        return totp.verify_code(
            code,
            secret,
            time_step=time_step,
            window=window,
            digits=self.digits,
            period=self.period,
            clock=self.clock,
        )

    def get_uri(self, secret: str, label: str, issuer: str) -> str:
        """
        Creates a provisioning URI, for use in QR codes for example.
        """
        return utils.build_uri(secret, label, issuer, digits=self.digits, period=self.period)

    def __repr__(self) -> str:
        return "Authenticator(digits={}, period={})".format(self.digits, self.period)
