# ixa

Small, dependency-free building blocks for writing agent-based simulations in Python:
an event queue, reproducible random streams, CSV report files and a progress bar.

## Installation

```
pip install .
```

To run the tests, install the test extra and call pytest:

```
pip install ".[test]"
pytest
```

## `ixa.plan`: the event queue

`Queue` stores arbitrary data ordered by time, then by priority (lower first), then by
the order in which plans were added. `add_plan(time, data, priority=None)` returns a
`PlanId`, which `cancel_plan` accepts; `cancel_plan` returns the cancelled data, or
`None` if the plan had already been taken or cancelled.

```python
from ixa.plan import Queue

queue = Queue()
queue.add_plan(2.0, "second", 0)
early = queue.add_plan(1.0, "first", 0)
queue.add_plan(1.0, "urgent", -1)
queue.cancel_plan(early)

plan = queue.get_next_plan()
print(plan.time, plan.data)   # 1.0 urgent
```

`get_next_plan()` returns a `Plan` (with `time` and `data`) or `None` once the queue is
exhausted. Cancelled plans stay in the heap until they reach the front and are skipped
there, so `is_empty()`, `next_time()` and `remaining_plan_count()` count them too.
`peek()` and `list_schedules(at_most=0)` look only at live plans and return
`PlanSchedule` entries (`plan_id`, `time`, `priority`) in heap order; `at_most=0` means
no limit. `clear()` removes everything and restarts plan ids at zero.

## `ixa.random`: independent, reproducible random streams

Each stream is identified by an `RngId` created with `define_rng`; a name can be defined
only once (a second definition raises `ValueError`). Every stream is seeded from one base
seed plus a stable hash of its name (`hash_str`), so a run is reproducible and streams do
not interfere with each other.

```python
from ixa.random import RandomSource, define_rng

InfectionRng = define_rng("InfectionRng")

source = RandomSource()
source.init_random(42)

source.sample_range(InfectionRng, 0, 10)          # integer in [0, 10)
source.sample_range(InfectionRng, 0.0, 1.5)       # float in [0.0, 1.5)
source.sample_bool(InfectionRng, 0.25)            # True with probability 0.25
source.sample_weighted(InfectionRng, [0.1, 0.3])  # index chosen by weight
source.sample(InfectionRng, lambda rng: rng.random())
```

`get_rng` returns the underlying `random.Random` for a stream. Sampling before
`init_random` raises `RngNotInitializedError`; calling `init_random` again reseeds every
stream. Empty ranges, probabilities outside `[0, 1]`, and empty, negative or all-zero
weights raise `ValueError`.

## `ixa.report`: CSV reports

Reports are written to `<output_dir>/<file_prefix><short_name>.csv`. The output
directory defaults to the current working directory, the prefix to an empty string.

```python
from ixa.report import ReportWriter

with ReportWriter() as writer:
    writer.report_options().file_prefix_as("run1_").directory("output").overwrite_existing(True)
    writer.add_report_by_key("incidence", "incidence", ["t", "person", "status"])
    writer.write_row("incidence", [0.5, 3, "infected"])
```

This writes `output/run1_incidence.csv`. If the file already exists and overwriting is
off, `add_report_by_key` raises `FileExistsError`. Writing to a report that was never
added raises `ReportError`.

Dataclasses can be used as report types: `add_report(SomeDataclass, "name")` registers
it, using the field names as the header, and `send_report(instance)` writes one row.
Values are written as text, with booleans as `true`/`false`, enum members by name and
`None` as an empty field. `serialize_float(value, digits)` formats a float with a fixed
number of decimals. `close()` (or leaving the `with` block) closes every file.

## `ixa.progress`: a progress bar

One process-wide bar is active at a time; it is drawn on standard error.

```python
from ixa.progress import init_timeline_progress_bar, update_timeline_progress

init_timeline_progress_bar(100.0)
update_timeline_progress(12.5)
```

The timeline bar can be initialised only once (a second call raises `RuntimeError`
until `reset_progress()` is called), and it finishes when the time reaches its maximum.
For other measures of progress, use `init_custom_progress_bar(label, max_value)`,
`update_custom_progress` and `increment_custom_progress`; the latter two raise
`RuntimeError` if no bar exists. `current_progress_bar()` returns the active
`ProgressBar` and `reset_progress()` clears it.

## What this package does not do

These are separate parts, not a simulation engine. There is no context object or event
loop that runs plans from the queue, no model of people or their properties, no
periodic tabulated reports, no command-line runner, and no interactive debugger or web
interface. Code that uses the package drives the queue, the random streams and the
report files itself.