class AuthenticatorException(Exception):
    """
    Base class for all errors raised by this library.
    """


class InvalidParameter(AuthenticatorException, ValueError):
    """
    A numeric argument (digits, period, window, time step or secret length)
    is outside its allowed bounds.
    """


class InvalidSecret(AuthenticatorException, ValueError):
    """
    The secret is not a string over the RFC 3548 Base32 alphabet.
    """


class RandomSourceUnavailable(AuthenticatorException, RuntimeError):
    """
    The platform could not supply cryptographically secure random bytes.
    """
