import calendar
import datetime
import logging
import time
from typing import Optional, Union

from . import base32, otp, utils
from .clock import Clock, system_clock
from .config import DEFAULT_DIGITS, DEFAULT_PERIOD, check_digits, check_period
from .exceptions import InvalidParameter

logger = logging.getLogger(__name__)

DEFAULT_WINDOW = 1


def timecode(for_time: Union[int, float, datetime.datetime], period: int = DEFAULT_PERIOD) -> int:
    """
    Accepts either a Unix timestamp or a datetime and returns the time step
    it falls into.

    Naive datetimes are read as local time.

    :param for_time: the time to convert
    :param period: seconds per time step
    :returns: ``floor(unix_time / period)``
    """
    check_period(period)
    if isinstance(for_time, datetime.datetime):
        if for_time.tzinfo:
            for_time = calendar.timegm(for_time.utctimetuple())
        else:
            for_time = time.mktime(for_time.timetuple())
    return int(for_time // period)


def current_time_step(period: int = DEFAULT_PERIOD, clock: Optional[Clock] = None) -> int:
    return timecode((clock or system_clock).time(), period)


def check_window(window: int) -> int:
    if isinstance(window, bool) or not isinstance(window, int) or window < 0:
        raise InvalidParameter("window must be a non-negative integer, got {!r}".format(window))
    return window


def verify_code(
    code: str,
    secret: str,
    time_step: Optional[int] = None,
    window: int = DEFAULT_WINDOW,
    digits: int = DEFAULT_DIGITS,
    period: int = DEFAULT_PERIOD,
    clock: Optional[Clock] = None,
) -> bool:
    """
    Checks the given code against the secret, accepting codes from up to
    ``window`` time steps before or after ``time_step`` to allow for clock
    drift.

    Each candidate is compared in constant time. Stopping at the first
    matching step only reveals which step matched.

    :param code: the code to check
    :param secret: secret over the RFC 3548 alphabet
    :param time_step: step to check around, defaults to the current one
    :param window: number of adjacent steps accepted on either side
    :param digits: code length, 6 or 8
    :param period: seconds per time step, used to resolve the current step
    :param clock: time source, defaults to the system clock
    :returns: True if the code matches a step in the window
    :raises InvalidSecret: before any hashing, if the secret is malformed
    """
    base32.check_secret(secret)
    check_window(window)
    check_digits(digits)
    check_period(period)
    if time_step is None:
        time_step = current_time_step(period, clock)
    else:
        otp.check_time_step(time_step)

    code = str(code)
    for offset in range(-window, window + 1):
        step = time_step + offset
        if step < 0:
            continue
        if utils.strings_equal(code, otp.compute_code(secret, step, digits)):
            logger.debug("Code matched at offset %d", offset)
            return True

    logger.debug("Code did not match within window %d", window)
    return False
