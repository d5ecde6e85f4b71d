# drillkit

drillkit is a library for working with a directory of small Rust exercises.
Each exercise is a source file with a deliberate mistake in it. drillkit
reads the exercise list, compiles and runs an exercise with `rustc` (or
lints it with `cargo clippy`), and tells whether the exercise still carries
its `I AM NOT DONE` marker comment. It can also write the
`rust-project.json` file that lets rust-analyzer understand the exercises.

It also ships worked Python solutions to many of the exercises in
`drillkit.lessons`.

## Requirements

- Python 3.11 or later
- A Rust toolchain with `rustc` on your `PATH` to compile exercises (and
  `cargo clippy` for Clippy exercises)

## Installation

```
pip install drillkit
```

## The exercise list

`drillkit.exercise.load_exercises(path="info.toml")` reads a TOML file that
lists the exercises in order:

```toml
[[exercises]]
name = "intro1"
path = "exercises/00_intro/intro1.rs"
mode = "compile"
hint = "Remove the I AM NOT DONE comment to move on."
```

`mode` is one of `compile`, `test` or `clippy` (the `Mode` enum). A missing
key raises `ValueError`.

## Working with an exercise

```python
from drillkit.exercise import CompileError, RunError, load_exercises

exercises = load_exercises()
exercise = exercises[0]

try:
    with exercise.compile() as compiled:
        output = compiled.run()
        print(output.stdout)
except CompileError as err:
    print(err.output.stderr)
except RunError as err:
    print(err.output.stdout, err.output.stderr)
```

- `Exercise.compile()` builds the file with `rustc` (`--test` in `test`
  mode, edition 2021, debug info stripped) into a temporary binary named by
  `temp_file()` in the current directory. In `clippy` mode it writes
  `./exercises/22_clippy/Cargo.toml`, builds the binary, runs `cargo clean`
  and then `cargo clippy` with warnings denied. On failure the binary is
  removed and `CompileError` is raised carrying an `ExerciseOutput`.
- `CompiledExercise.run()` runs the binary (with `--show-output` in `test`
  mode) and returns an `ExerciseOutput`, or raises `RunError`.
  `CompiledExercise.close()`, also called on leaving a `with` block, removes
  the binary; `clean()` does the same directly.
- `Exercise.state()` returns a `State`. `State.done()` is true when no
  `I AM NOT DONE` marker comment is found; otherwise `State.context` holds
  `ContextLine` objects for the marker line and up to two lines either side,
  with their 1-based numbers and the marker line flagged as `important`.
  `Exercise.looks_done()` is a shortcut for `state().done()`.
- `str(exercise)` is the exercise's path.

## rust-analyzer support

```python
from drillkit.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()            # RUST_SRC_PATH, or asks `rustc --print sysroot`
project.exercises_to_json("./exercises")
project.write_to_disk("./rust-project.json")
```

`exercises_to_json` adds a `Crate` (edition 2021, `cfg = ["test"]`) for every
`.rs` file below the given directory; `add_path` adds a single file and
reports whether it was a `.rs` file. `to_dict` returns the data that
`write_to_disk` writes as compact JSON.

## Terminal helpers

`drillkit.ui` provides `warn` and `success` (coloured status lines),
`bold` and `blue` (ANSI styling), `no_emoji()`, and `Spinner`, a context
manager that draws a ticking spinner on stderr when it is a terminal.

## Environment

Setting `NO_EMOJI` to any value replaces emoji in status messages with plain
characters. When `RUST_SRC_PATH` is set, `RustAnalyzerProject.get_sysroot_src`
uses it instead of asking `rustc`.

## Reference solutions

`drillkit.lessons` holds worked solutions as plain Python functions and
classes, grouped by topic: `basics`, `text`, `sequences`, `messages`,
`hashmaps`, `options`, `errors`, `traits`, `iterators` and `pointers`.

```python
from drillkit.lessons.basics import calculate_price_of_apples
from drillkit.lessons.errors import parse_pos_nonzero

calculate_price_of_apples(41)   # 41
parse_pos_nonzero("42")         # PositiveNonzeroInteger(value=42)
```

## What drillkit does not do

drillkit has no command-line program. It offers no command to verify every
exercise in order, no watch mode that re-checks exercises when files are
saved, no command to list exercises with their status, to print a hint or to
reset an exercise. These are left to code that uses the library.