import pytest

from authenticator import FixedClock

# "12345678901234567890" in Base32, the RFC 4226 / RFC 6238 test key
RFC_SECRET = "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ"


class StaticRandomSource(object):
    """Returns preset bytes instead of random ones."""

    def __init__(self, data: bytes) -> None:
        self.data = data
        self.requested = []

    def next_bytes(self, n: int) -> bytes:
        self.requested.append(n)
        return self.data[:n]


@pytest.fixture
def rfc_secret():
    return RFC_SECRET


@pytest.fixture
def clock():
    return FixedClock(59)


@pytest.fixture
def static_source():
    return StaticRandomSource(bytes(range(80)))


@pytest.fixture
def make_source():
    return StaticRandomSource
