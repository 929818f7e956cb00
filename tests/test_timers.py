import re
import time

from timingkit import timers as timing
from timingkit.timers import Timers, get_timers

MS = 0.001


def _sleep_ms(n):
    time.sleep(n * MS)


def test_measure():
    tm = get_timers()

    tm.start("m1")
    _sleep_ms(1)
    d1 = tm.measure("m1")

    tm.start("m2")
    _sleep_ms(2)
    d2 = tm.measure("m2")

    assert d1 < d2
    assert tm.measure("m1") == d1

    timing.start("m3")
    _sleep_ms(2)
    d3 = timing.measure("m3")
    assert int(d3 * 1000) >= 1


def test_timing_elapsed():
    tm = get_timers()

    tm.start("m1")
    _sleep_ms(2)
    d1 = tm.elapsed("m1")
    _sleep_ms(1)
    d2 = tm.elapsed("m1")
    assert d1 < d2

    timing.start("m3")
    _sleep_ms(2)
    d3 = timing.elapsed("m3")
    assert int(d3 * 1000) >= 1

    _sleep_ms(2)
    d4 = timing.elapsed("m3")
    assert int(d4 * 1000) > int(d3 * 1000)


def test_timing_elapsed_all():
    tm = Timers("test")
    tm.start("m1", "m2")
    _sleep_ms(2)
    first = tm.elapsed_all()
    _sleep_ms(2)
    second = tm.elapsed_all()
    assert set(first) == {"m1", "m2"}
    assert first["m1"] < second["m1"]
    assert first["m2"] < second["m2"]


def test_measure_all():
    tm = get_timers()
    tm.start("m1")
    _sleep_ms(2)
    t1 = tm.measure("m1")

    tm.start("m2")
    _sleep_ms(2)
    t2 = tm.measure("m2")

    tm.start("m3")
    _sleep_ms(2)

    result = tm.measure_all()
    assert result["m1"] == t1
    assert result["m2"] == t2
    assert result["m3"] > MS

    result2 = timing.measure_all()
    assert result2["m1"] == t1
    assert result2["m2"] == t2
    assert result2["m3"] > MS


def test_pause_resume():
    tm = get_timers()

    tm.start("m1")
    _sleep_ms(2)
    tm.pause("m1")
    d1 = tm.elapsed("m1")
    _sleep_ms(2)
    d2 = tm.elapsed("m1")
    assert d1 == d2

    tm.resume("m1")
    _sleep_ms(2)
    d3 = tm.elapsed("m1")
    assert d3 > d2

    timing.start("m2")
    _sleep_ms(2)
    tm.pause("m2")
    d4 = tm.elapsed("m2")
    _sleep_ms(2)
    d5 = tm.elapsed("m2")
    assert d4 == d5

    tm.resume("m2")
    _sleep_ms(2)
    d6 = tm.elapsed("m2")
    assert d6 > d5


def test_pause_all():
    tm = Timers("TestPauseAll")
    tm.start("m1", "m2", "m3")
    _sleep_ms(2)
    tm.pause_all()
    _sleep_ms(2)
    result = tm.measure_all()
    assert set(result) == {"m1", "m2", "m3"}
    assert all(value <= 3 * MS for value in result.values())


def test_module_pause_all_and_resume():
    timing.start("pa1")
    _sleep_ms(1)
    timing.pause_all()
    frozen = timing.elapsed_all()["pa1"]
    _sleep_ms(2)
    assert timing.elapsed("pa1") == frozen
    timing.resume("pa1")
    _sleep_ms(2)
    assert timing.elapsed("pa1") > frozen
    timing.pause("pa1")
    paused = timing.elapsed("pa1")
    _sleep_ms(1)
    assert timing.elapsed("pa1") == paused


def test_get_timers_returns_shared_instance():
    assert get_timers() is get_timers()
    assert get_timers().label == "defaultTimers"


def test_elapsed_creates_missing_timer():
    tm = Timers("create")
    assert tm.elapsed_all() == {}
    tm.elapsed("new")
    assert list(tm.elapsed_all()) == ["new"]


def test_pause_and_resume_ignore_unknown_names():
    tm = Timers("unknown")
    tm.pause("ghost")
    tm.resume("ghost")
    assert tm.measure_all() == {}


def test_message_format_for_fresh_timer():
    tm = Timers("msg")
    assert tm.message("fresh") == "0.000    ms fresh"


def test_message_after_sleep():
    tm = Timers("msg2")
    tm.start("work")
    _sleep_ms(5)
    text = tm.message("work")
    match = re.fullmatch(r"(\d+\.\d{3}) *ms work", text)
    assert match is not None
    assert len(text.split(" ms ")[0]) >= 8
    assert float(match.group(1)) >= 0.005