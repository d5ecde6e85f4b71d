"""Exercises: loading, compiling, running and checking completion state."""

from __future__ import annotations

import enum
import os
import re
import subprocess
import threading
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from drillkit import ui

RUSTC_COLOR_ARGS = ("--color", "always")
RUSTC_EDITION_ARGS = ("--edition", "2021")
RUSTC_NO_DEBUG_ARGS = ("-C", "strip=debuginfo")
CONTEXT = 2
CLIPPY_CARGO_TOML_PATH = "./exercises/22_clippy/Cargo.toml"

_PENDING = re.compile(r"^\s*///?\s*I\s+AM\s+NOT\s+DONE", re.MULTILINE)


def temp_file() -> str:
    """Name of the binary built for the current process and thread."""
    thread_id = "".join(c for c in f"ThreadId({threading.get_ident()})" if c.isalnum())
    return f"./temp_{os.getpid()}_{thread_id}"


def clean() -> None:
    """Remove the built binary, if any."""
    try:
        os.remove(temp_file())
    except OSError:
        pass


class Mode(enum.Enum):
    """How an exercise is checked."""

    COMPILE = "compile"
    TEST = "test"
    CLIPPY = "clippy"


@dataclass(frozen=True)
class ContextLine:
    """A source line shown around the pending marker."""

    line: str
    number: int
    important: bool


@dataclass(frozen=True)
class State:
    """Completion state; a pending exercise carries the lines around its marker."""

    context: tuple[ContextLine, ...] = ()

    def done(self) -> bool:
        return not self.context


@dataclass
class ExerciseOutput:
    """Captured output of a finished process."""

    stdout: str
    stderr: str


class CompileError(Exception):
    """Compilation of an exercise failed."""

    def __init__(self, output: ExerciseOutput) -> None:
        super().__init__(output.stderr)
        self.output = output


class RunError(Exception):
    """Running a compiled exercise failed."""

    def __init__(self, output: ExerciseOutput) -> None:
        super().__init__(output.stderr)
        self.output = output


def _execute(args: list[str]) -> subprocess.CompletedProcess:
    return subprocess.run(args, capture_output=True)


def _output(result: subprocess.CompletedProcess) -> ExerciseOutput:
    return ExerciseOutput(
        stdout=(result.stdout or b"").decode("utf-8", errors="replace"),
        stderr=(result.stderr or b"").decode("utf-8", errors="replace"),
    )


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def _cargo_toml(name: str) -> str:
    return (
        "[package]\n"
        f'name = "{name}"\n'
        'version = "0.0.1"\n'
        'edition = "2021"\n'
        "[[bin]]\n"
        f'name = "{name}"\n'
        f'path = "{name}.rs"'
    )


@dataclass
class Exercise:
    """One exercise as described in the exercise list."""

    name: str
    path: Path
    mode: Mode
    hint: str = ""

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self.mode = Mode(self.mode)

    def __str__(self) -> str:
        return str(self.path)

    def _rustc_command(self, *prefix: str) -> list[str]:
        return [
            "rustc",
            *prefix,
            str(self.path),
            "-o",
            temp_file(),
            *RUSTC_COLOR_ARGS,
            *RUSTC_EDITION_ARGS,
            *RUSTC_NO_DEBUG_ARGS,
        ]

    def _clippy(self) -> subprocess.CompletedProcess:
        try:
            Path(CLIPPY_CARGO_TOML_PATH).write_text(_cargo_toml(self.name), encoding="utf-8")
        except OSError as err:
            message = (
                "Failed to write Clippy Cargo.toml file."
                if ui.no_emoji()
                else "Failed to write 📎 Clippy 📎 Cargo.toml file."
            )
            raise RuntimeError(message) from err
        # Build an executable too, so clippy exercises can also be run.
        try:
            _execute(self._rustc_command())
        except OSError as err:
            raise RuntimeError("Failed to compile!") from err
        # A clean is needed for clippy to report every lint.
        try:
            _execute(["cargo", "clean", "--manifest-path", CLIPPY_CARGO_TOML_PATH, *RUSTC_COLOR_ARGS])
        except OSError as err:
            raise RuntimeError("Failed to run 'cargo clean'") from err
        return _execute(
            [
                "cargo",
                "clippy",
                "--manifest-path",
                CLIPPY_CARGO_TOML_PATH,
                *RUSTC_COLOR_ARGS,
                "--",
                "-D",
                "warnings",
                "-D",
                "clippy::float_cmp",
            ]
        )

    def compile(self) -> "CompiledExercise":
        """Compile the exercise; raise CompileError with the output on failure."""
        try:
            if self.mode is Mode.COMPILE:
                result = _execute(self._rustc_command())
            elif self.mode is Mode.TEST:
                result = _execute(self._rustc_command("--test"))
            else:
                result = self._clippy()
        except OSError as err:
            raise RuntimeError("Failed to run 'compile' command.") from err

        if result.returncode == 0:
            return CompiledExercise(self)
        clean()
        raise CompileError(_output(result))

    def run(self) -> ExerciseOutput:
        """Run the built binary; raise RunError with the output on failure."""
        arg = "--show-output" if self.mode is Mode.TEST else ""
        try:
            result = _execute([temp_file(), arg])
        except OSError as err:
            raise RuntimeError("Failed to run 'run' command") from err
        output = _output(result)
        if result.returncode != 0:
            raise RunError(output)
        return output

    def state(self) -> State:
        """Read the source and locate the pending marker, if any."""
        source = self.path.read_text(encoding="utf-8")
        if not _PENDING.search(source):
            return State()

        lines = _lines(source)
        matched = next((i for i, line in enumerate(lines) if _PENDING.search(line)), None)
        if matched is None:
            raise RuntimeError(f"pending marker in {self.path} does not sit on a single line")

        low = max(matched - CONTEXT, 0)
        high = matched + CONTEXT
        return State(
            tuple(
                ContextLine(line=line, number=i + 1, important=i == matched)
                for i, line in enumerate(lines[low : high + 1], start=low)
            )
        )

    def looks_done(self) -> bool:
        """True when the pending marker has been removed."""
        return self.state().done()


@dataclass
class CompiledExercise:
    """A successfully built exercise; closing it removes the binary."""

    exercise: Exercise
    _closed: bool = field(default=False, init=False, repr=False)

    def run(self) -> ExerciseOutput:
        return self.exercise.run()

    def close(self) -> None:
        if not self._closed:
            clean()
            self._closed = True

    def __enter__(self) -> "CompiledExercise":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def load_exercises(path: str | os.PathLike = "info.toml") -> list[Exercise]:
    """Read the exercise list from a TOML file."""
    with open(path, "rb") as fh:
        data = tomllib.load(fh)
    try:
        return [
            Exercise(name=item["name"], path=Path(item["path"]), mode=Mode(item["mode"]), hint=item["hint"])
            for item in data["exercises"]
        ]
    except KeyError as err:
        raise ValueError(f"invalid exercise list in {path}: missing {err}") from err