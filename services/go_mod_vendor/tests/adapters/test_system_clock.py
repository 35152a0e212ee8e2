from datetime import timedelta

from go_mod_vendor.adapters.clock.system_clock import Clock


def test_measure_reports_elapsed_time():
    times = iter([10.0, 12.5])
    calls = []
    measurement = Clock(now=lambda: next(times)).measure(lambda: calls.append(1))
    assert calls == [1]
    assert measurement.duration == timedelta(seconds=2.5)
    assert measurement.error is None


def test_measure_captures_error_with_duration():
    times = iter([1.0, 2.0])
    error = ValueError("nope")

    def boom() -> None:
        raise error

    measurement = Clock(now=lambda: next(times)).measure(boom)
    assert measurement.error is error
    assert measurement.duration == timedelta(seconds=1)


def test_measure_clamps_backwards_clock():
    times = iter([5.0, 4.0])
    measurement = Clock(now=lambda: next(times)).measure(lambda: None)
    assert measurement.duration == timedelta(0)
