# timingkit

This package measures how long things take.

- `timingkit.stopwatch.StopWatch` measures elapsed time. You can start, pause,
  stop and restart it.
- `timingkit.timers.Timers` holds a set of named stopwatches. You can start,
  pause, resume and measure several of them together. Access to the set is
  guarded by a lock, so you can share one `Timers` between threads.
- A process-wide default `Timers` comes with module-level shortcuts.

All times are in seconds, as floats. The clock is `time.perf_counter()`.

## Installation

```
pip install timingkit
```

The package has no runtime dependencies.

## StopWatch

```python
from timingkit.stopwatch import StopWatch

sw = StopWatch(auto_start=True)
do_work()
sw.pause()            # add the running time to the total and stop running
do_other_things()     # not counted
sw.start()            # keep counting from here
do_more_work()
print(sw.elapsed())   # seconds spent in do_work and do_more_work
```

- `StopWatch()` is created idle. `StopWatch(auto_start=True)` starts counting
  at once.
- `start()` begins a new interval and clears any stop time. Time counted
  before stays in the total.
- `pause()` adds the current interval to the total and stops running. If the
  watch was stopped, the interval ends at the stop time. If the watch is not
  running, `pause()` does nothing.
- `stop()` fixes the end of the current interval. `elapsed()` then stays the
  same until the watch is started again.
- `restart()` sets the total back to zero and starts counting again.
- `elapsed()` returns the total so far, including any running interval.

Every method that reads the clock has an `_at` variant that takes a
`time.perf_counter()` reading instead: `start_at(at)`, `restart_at(at)`,
`pause_at(at)` and `stop_at(at)`. These make results reproducible in tests:

```python
sw = StopWatch()
sw.start_at(10.0)
sw.pause_at(12.5)
assert sw.elapsed() == 2.5
```

## Named timers

```python
from timingkit.timers import Timers

timers = Timers("request")
timers.start("parse", "total")
parse()
timers.pause("parse")
handle()
print(timers.measure("total"))  # pauses "total" and returns its seconds
print(timers.elapsed_all())     # seconds of every timer, without pausing
print(timers.message("parse"))  # a formatted line for logging
```

- `start(*names)` starts the named timers at one shared instant and creates
  any that do not exist yet.
- `measure(name)` pauses the timer and returns its elapsed seconds.
- `elapsed(name)` returns the elapsed seconds and leaves the timer running.
- `measure_all()` and `elapsed_all()` do the same for every timer and return a
  dictionary keyed by timer name.
- `pause(*names)` pauses the named timers. `pause_all()` pauses every timer.
- `resume(*names)` continues the named timers.
- `pause` and `resume` ignore names that do not exist.
- `message(name)` pauses the timer, like `measure`, and returns a line such as
  `"0.012    ms parse"`. The figure is the elapsed time cut down to whole
  milliseconds and divided by 1000. It is printed left-aligned in eight
  characters with three decimals.

If `measure` or `elapsed` is given a name that has not been started yet, a new
timer is created under that name and starts counting.

The label given to `Timers(label)` is kept as the `label` attribute.

## The default timers

`get_timers()` returns the shared default `Timers`, labelled
`"defaultTimers"`. The module-level functions in `timingkit.timers` act on it.
They are `start`, `measure`, `measure_all`, `elapsed`, `elapsed_all`, `pause`,
`pause_all` and `resume`.

```python
from timingkit import timers

timers.start("load")
load()
print(timers.measure("load"))
timers.start("a", "b")
timers.pause("a")
timers.resume("a")
print(timers.measure_all())
```

## What it does not do

timingkit is a library only. It has no command-line tool. It does not write
reports, keep history, or store timings anywhere. Timings exist only in the
objects that hold them.