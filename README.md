# gavelkit

Small building blocks for polling loops and status reporting. Pure Python,
no dependencies outside the standard library.

## Modules

- `gavelkit.callback` – `Callback` collects zero-argument callables with
  `add_callback`, calls them all in order with `trigger`, and empties itself
  with `clear_callbacks`; `len()` gives how many are registered.
- `gavelkit.identity` – `generate_id()` returns sequential 16-bit ids starting
  at 6000. `Identifiable` objects take one on creation (`id` property,
  `override_id`) and refuse to be copied.
- `gavelkit.imemory` – `IMemory`, an abstract byte-addressable block
  (`[]`, `len()`, `init_memory`, `print_data`, `update_external`) with an
  `internal` flag for signalling updates.
- `gavelkit.average` – `Average`, a Q15 fixed-point exponential moving average
  with smoothing factor 2 / (window + 1).
- `gavelkit.stopwatch` – `StopWatch` (`start`, `stop`, `elapsed`) and
  `AvgStopWatch`, which averages its measurements and keeps low and high water
  marks that reset when read. Both take an optional microsecond `clock`.
- `gavelkit.timer` – `Timer`, a periodic timer: `expired_micro(timestamp)`
  returns how many whole periods have passed and catches up past them;
  arithmetic wraps like an unsigned counter. A zero period always reports one
  expiry, and more than 1000 missed periods restarts the timer.
- `gavelkit.parameter` – `ParameterList` holds up to 150 `Parameter`
  name/value pairs (each part cut to 32 characters); `parameter_list()` returns
  a shared instance.
- `gavelkit.stringutils` – `safe_append`, `safe_compare`, `tab`,
  `hex_byte_string`, `dec_byte_string`, `mac_string`, `ip_string`,
  `time_string`, `trim_whitespace`, `num_to_a` and `is_valid_c_string`.
  Text ends at the first NUL character, as in a C string.
- `gavelkit.stringbuilder` – `StringBuilder`, holding at most 119 characters
  and silently dropping the rest. Booleans render as `true`/`false`, integers
  in decimal, floats with one decimal place, and each byte of a `bytes` value
  as its decimal code.
- `gavelkit.datastructure` – bounded `ClassicQueue` (FIFO), `ClassicStack`
  (LIFO) and `ClassicSortList` (a stack with `sort` and `swap`, sorting with a
  three-way comparator). A push onto a full list raises `ListFullError`, a pop
  from an empty one raises `ListEmptyError`; every failure also sets an error
  flag that `error()` reports until `clear()`.
- `gavelkit.lock` – `Mutex` and `SemLock` with `take`/`give`, usable in a
  `with` statement.
- `gavelkit.communication` – `MutexQueue` and `SemQueue`, a `ClassicQueue`
  with every operation run under a lock.

## Installation

```
pip install gavelkit
```

## Examples

```python
from gavelkit.datastructure import ClassicQueue, ClassicSortList
from gavelkit.stringbuilder import StringBuilder
from gavelkit.stringutils import mac_string, time_string
from gavelkit.timer import Timer

queue = ClassicQueue(3)
queue.push(10)
queue.push(20)
assert queue.pop() == 10

numbers = ClassicSortList(4)
for n in (3, 1, 2):
    numbers.push(n)
numbers.sort(lambda a, b: (a > b) - (a < b))
assert [numbers.get(i) for i in range(len(numbers))] == [1, 2, 3]

timer = Timer(clock=lambda: 0)
timer.set_refresh_micro(1000)
timer.reset(0)
assert timer.expired_micro(4500) == 4  # four full intervals have passed

sb = StringBuilder("Value: ")
sb + 99 + ", Done"
assert str(sb) == "Value: 99, Done"

print(mac_string(bytes([0x02, 0x00, 0x00, 0xAA, 0xBB, 0xCC])))  # 02:00:00:AA:BB:CC
print(time_string(3661))  # 1:01:01
```

## What it does not include

The package is a library only. It has no command-line program, no network
server or client, and does nothing with hardware such as watchdogs; timers and
stopwatches read a clock you pass in, or the process's performance counter.

## Running the tests

```
pip install -e .[test]
pytest
```