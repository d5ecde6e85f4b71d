"""Load, compile, run and check the completion state of small Rust exercises."""

__version__ = "0.1.0"