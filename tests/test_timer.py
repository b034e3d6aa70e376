import pytest

from gavelkit.timer import Timer


class FakeClock:
    def __init__(self, now=0):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock(0)


def test_zero_timeout_behavior(clock):
    t = Timer(clock)
    t.set_refresh_micro(0)
    t.reset(0)
    assert t.expired_micro(12345) == 1
    assert t.expired() is True


def test_multiple_expirations_and_catchup(clock):
    t = Timer(clock)
    t.set_refresh_micro(1000)
    t.reset(0)
    assert t.expired_micro(4500) == 4
    assert t.last_expired == 4000
    assert t.expired_micro(4500) == 0


def test_run_false_halts_expiration(clock):
    t = Timer(clock)
    t.set_refresh_micro(1000)
    t.reset(0)
    t.run_timer(False, 0)
    assert t.running is False
    assert t.expired_micro(50000) == 0
    assert t.time_remaining_micro() == 1000000


def test_reset_behavior(clock):
    t = Timer(clock)
    t.set_refresh_micro(1000)
    t.reset(100)
    assert t.expired_micro(1500) == 1
    t.reset(2000)
    assert t.expired_micro(2000) == 0
    assert t.last_expired == 2000


def test_wraparound_32bit_unsigned(clock):
    r = 0xFFFFFFFF - 500
    t = Timer(clock)
    t.set_refresh_micro(1000)
    t.reset(r)
    ts = (r + 1000) & 0xFFFFFFFF
    assert t.expired_micro(ts) == 1001
    assert t.last_expired == (r + 1000) & 0xFFFFFFFF


def test_large_gap_safety_cap(clock):
    t = Timer(clock)
    t.set_refresh_micro(1)
    t.reset(0)
    assert t.expired_micro(5000) == 1001
    assert t.last_expired == 5000


def test_expired_milli_path(clock):
    t = Timer(clock)
    t.set_refresh_milli(10)
    t.reset(0)
    assert t.expired_milli(25) == 2
    assert t.last_expired == 20000


def test_time_remaining_basic(clock):
    t = Timer(clock)
    t.set_refresh_micro(1000)
    t.reset(0)
    clock.now = 999
    assert t.time_remaining_micro() == 1
    clock.now = 1000
    assert t.time_remaining_micro() == 0
    assert t.expired_micro(1000) == 1
    assert t.time_remaining_micro() == 1000


def test_time_remaining_coarser_units(clock):
    t = Timer(clock)
    t.set_refresh_seconds(2)
    t.reset(0)
    assert t.time_remaining_micro() == 1000000
    assert t.time_remaining_milli() == 1000
    assert t.time_remaining_second() == 1


def test_getters_and_setters(clock):
    t = Timer(clock)
    t.set_refresh_seconds(2)
    assert t.refresh_seconds == 2
    assert t.refresh_milli == 2000
    assert t.refresh_micro == 2000000

    t.set_refresh_milli(150)
    assert t.refresh_seconds == 0
    assert t.refresh_milli == 150
    assert t.refresh_micro == 150000

    t.set_refresh_micro(1234)
    assert t.refresh_micro == 1234


def test_default_timeout_and_start(clock):
    clock.now = 777
    t = Timer(clock)
    assert t.refresh_micro == 100000
    assert t.last_expired == 777
    assert t.running is True


def test_expired_bool(clock):
    t = Timer(clock)
    t.set_refresh_micro(500)
    t.reset(0)
    clock.now = 400
    assert t.expired() is False
    clock.now = 500
    assert t.expired() is True
    assert t.last_expired == 500


def test_run_timer_uses_clock_when_no_refresh(clock):
    t = Timer(clock)
    clock.now = 4321
    t.run_timer(True)
    assert t.last_expired == 4321