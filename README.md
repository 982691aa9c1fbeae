# rustdrill

rustdrill is a small Python library for people working through a set of
small Rust exercises. It offers three things:

- `rustdrill.ui`: coloured warning and success lines for the terminal;
- `rustdrill.project`: building a `rust-project.json` file so that
  rust-analyzer treats every exercise file as its own crate;
- `rustdrill.drills`: worked solutions to many exercise topics, written as
  plain Python functions and classes you can import and compare against.

Install it with its test extra to run the test suite:

    pip install rustdrill[test]
    pytest

## Status lines: `rustdrill.ui`

```python
from rustdrill.ui import success, warn

warn("Compiling of exercises/if/if1.rs failed!")
success("Successfully ran exercises/if/if1.rs")
```

`warn` prints its message in red and `success` in green, both through
`rich`, and each returns the plain text it printed. The prefix is an emoji
(`⚠️` or `✅`) unless the `NO_EMOJI` environment variable is set, in which
case it is `!` or `✓`. `no_emoji()` tells you whether that variable is set.

## rust-analyzer project file: `rustdrill.project`

```python
from rustdrill.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()
project.exercises_to_json("exercises")
project.write_to_disk("rust-project.json")
```

- `get_sysroot_src()` uses `RUST_SRC_PATH` when it is set; otherwise it runs
  `rustc --print sysroot`, prints the toolchain it found, and sets
  `sysroot_src` to `<sysroot>/lib/rustlib/src/rust/library`.
- `exercises_to_json(root)` walks everything under `root` (default
  `./exercises`) in sorted order and passes each path to `path_to_json`.
- `path_to_json(path)` adds a `Crate` when the text after the first dot of
  the path is exactly `rs`. Each crate has edition `2021`, no dependencies and
  the `test` cfg, so rust-analyzer works inside test blocks.
- `to_json()` returns the project as compact JSON; `write_to_disk(path)`
  writes it (default `./rust-project.json`).

## Worked solutions: `rustdrill.drills`

| Module | What it holds |
| --- | --- |
| `quizzes` | `calculate_price_of_apples`; `transformer` with the `Uppercase`, `Trim` and `Append` commands; `ReportCard.render` |
| `basics` | `bigger`, `foo_if_fizz`, `call_me`, `is_even`, `sale_price`, `square` |
| `colors` | `Color.from_components` and `Color.from_rgb`, raising `IntoColorError` whose `kind` is a `ColorErrorKind` |
| `errors` | `generate_nametag_text`, `total_cost`, `remaining_tokens`, `PositiveNonzeroInteger`, `CreationError`, `parse_pos_nonzero` raising `ParsePosNonzeroError` |
| `texts` | `capitalize_first`, `capitalize_words_vector`, `capitalize_words_string`, `trim_me`, `compose_me`, `replace_me` |
| `iterators` | `divide` with `NotDivisibleError` and `DivideByZeroError`; `result_with_list`, `list_of_results`, `factorial`; `Progress` and the `count_*` functions |
| `hashmaps` | `Fruit`, `fruit_basket`, `fill_basket`, `Team`, `build_scores_table` |
| `sequences` | `maybe_icecream`, `array_and_vec`, `vec_loop`, `vec_map` |
| `messages` | `Point`, the `ChangeColor`, `Echo`, `Move` and `Quit` messages, and `State.process` |
| `traits` | `append_bar`, `Licensed`, `SomeSoftware`, `OtherSoftware`, `compare_license_types`, `SomeStruct`, `OtherStruct`, `some_func` |
| `pointers` | the `Cons`/`Nil` list, `create_empty_list`, `create_non_empty_list`, `abs_all` |
| `threads` | `run_timed_threads`, `complete_jobs`, `Queue`, `send_tx`, `receive_all` |

A few examples:

```python
>>> from rustdrill.drills.quizzes import Append, Uppercase, transformer
>>> transformer([("hello", Uppercase()), ("foo", Append(1))])
['HELLO', 'foobar']

>>> from rustdrill.drills.colors import Color
>>> Color.from_rgb(183, 65, 14)
Color(red=183, green=65, blue=14)

>>> from rustdrill.drills.errors import total_cost
>>> total_cost("34")
171

>>> from rustdrill.drills.iterators import divide, list_of_results
>>> divide(81, 9)
9
>>> list_of_results()
[1, 11, 1426, 3]
```

Where a solution models a fixed-width integer, it raises `OverflowError`
when a result falls outside that width (for example `square` and
`sale_price` for signed 32-bit values, `factorial` for unsigned 64-bit).
Failures are raised as exceptions; `list_of_results` is the exception to
that, keeping each `DivisionError` in place of its result.

## What rustdrill does not do

rustdrill has no command-line program. It does not compile, run or test
exercise files, does not read a list of exercises, does not track which
exercises are done, has no watch mode, and does not print hints or reset
exercises. It gives you the building blocks above and the worked solutions;
compiling and checking your Rust code is left to `rustc` and `cargo`.