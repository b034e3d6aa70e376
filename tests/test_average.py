from gavelkit.average import Average


def test_starts_at_zero():
    assert Average().value == 0


def test_window_of_one_tracks_last_sample():
    avg = Average(1)
    avg.sample(100)
    assert avg.value == 100
    avg.sample(7)
    assert avg.value == 7


def test_window_zero_behaves_like_one():
    zero = Average(0)
    one = Average(1)
    for v in (5, 900, 31):
        zero.sample(v)
        one.sample(v)
        assert zero.value == one.value


def test_reset_returns_to_zero():
    avg = Average(1)
    avg.sample(500)
    avg.reset()
    assert avg.value == 0


def test_constant_input_rises_monotonically_and_stays_bounded():
    avg = Average(1000)
    target = 10000
    previous = avg.value
    for _ in range(5000):
        avg.sample(target)
        assert previous <= avg.value <= target
        previous = avg.value
    assert avg.value > 0


def test_smaller_window_responds_faster():
    fast = Average(5)
    slow = Average(500)
    for _ in range(10):
        fast.sample(2000)
        slow.sample(2000)
    assert fast.value > slow.value


def test_set_window_size_changes_response():
    avg = Average(1000)
    avg.set_window_size(1)
    avg.sample(321)
    assert avg.value == 321