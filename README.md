# exerciser

A library for a course of small programming exercises. It holds worked
solutions to the course's exercises as plain Python functions and classes,
a helper that writes a `rust-project.json` file so that rust-analyzer can
open the exercise files, and two helpers for coloured status messages.

## Installing

```
pip install .
```

## Status messages

`exerciser.ui` prints one-line messages through rich:

- `warn(message)` prints the message in red after a warning marker.
- `success(message)` prints the message in green after a tick marker.

When the environment variable `NO_EMOJI` is set, the markers are plain
`!` and `✓` instead of emoji.

## rust-analyzer project file

`exerciser.project.RustAnalyzerProject` builds the contents of
`rust-project.json`: a `sysroot_src` string and a list of `Crate` entries
(`root_module`, `edition` "2021", empty `deps`, and `cfg` `["test"]` so that
test blocks are analysed).

```python
from exerciser.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()      # RUST_SRC_PATH, or derived from `rustc --print sysroot`
project.exercises_to_json()    # one crate per .rs file below ./exercises
if project.crates:
    project.write_to_disk()    # writes ./rust-project.json
```

- `add_path(path)` adds a crate when the part of the path after its first dot
  is `rs`.
- `to_json()` returns the compact JSON text that `write_to_disk()` writes.
- `get_sysroot_src()` uses `RUST_SRC_PATH` when it is set; otherwise it runs
  `rustc --print sysroot`, prints the toolchain it found, and points at its
  `lib/rustlib/src/rust/library` directory.

Run it from the directory that holds `exercises/`.

## Lessons

The `exerciser.lessons` package holds the solutions, grouped by topic:

- `basics`: apple prices, `bigger`, `foo_if_fizz`, `is_even`, `sale_price`,
  `square`, string helpers (`trim_me`, `compose_me`, `replace_me`,
  `is_a_color_word`), list helpers (`array_and_vec`, `vec_loop`, `vec_map`)
  and `maybe_icecream`.
- `structs`: `ColorClassicStruct`, `ColorTupleStruct`, `UnitLikeStruct`,
  `Order` with `create_order_template`, `Package` (raises `ValueError` for a
  weight that is not positive), `Rectangle`, `ReportCard` and `Wrapper`.
- `pointers`: a cons list (`Cons`, `create_empty_list`,
  `create_non_empty_list`) and a copy-on-write sequence (`Cow`, `abs_all`).
- `enums`: `Command` and `transformer`; messages `ChangeColor`, `Echo`,
  `Move`, `Quit` processed by `State.process`.
- `iterators`: `capitalize_first` and friends, `divide` with
  `DivisionError`, `NotDivisibleError`, `DivideByZeroError`,
  `result_with_list`, `list_of_results`, `factorial`, and `Progress` counting
  with `count_iterator` and `count_collection_iterator`.
- `traits`: `append_bar`, `append_bar_to_list`, `Licensed`,
  `compare_license_types`, `SomeTrait`, `OtherTrait` and `some_func`.
- `errors`: `generate_nametag_text`, `total_cost`, `purchase`,
  `PositiveNonzeroInteger` with `CreationError`, and `parse_pos_nonzero`
  raising `ParsePosNonzeroError`.
- `hashmaps`: `fruit_basket`, `Fruit` with `fill_fruit_basket`, and
  `build_scores_table` returning a `Team` per name.
- `threads`: `run_timed_jobs`, `run_jobs` with a locked `JobStatus`, and a
  two-producer `Queue` sent by `send_tx` and collected by `receive_all`.

## What it does not do

There is no command-line program. The package does not read an exercise
list, compile or run exercises, check whether an exercise is done, track
progress, watch files for changes, reset exercises or show hints; the
conversion lessons are not included either.

## Tests

```
pip install .[test]
pytest
```