"""Generation of the rust-project.json file used by rust-analyzer."""

from __future__ import annotations

import dataclasses
import json
import os
import subprocess
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Crate:
    """One exercise file treated as a crate root."""

    root_module: str
    edition: str = "2021"
    deps: list[str] = field(default_factory=list)
    # Lets rust-analyzer work inside #[test] blocks.
    cfg: list[str] = field(default_factory=lambda: ["test"])


@dataclass
class RustAnalyzerProject:
    """The contents of rust-project.json."""

    sysroot_src: str = ""
    crates: list[Crate] = field(default_factory=list)

    def to_dict(self) -> dict:
        return dataclasses.asdict(self)

    def write_to_disk(self, path: str | os.PathLike = "./rust-project.json") -> None:
        """Write the project description as compact JSON."""
        text = json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)
        Path(path).write_text(text, encoding="utf-8")

    def add_path(self, path: str | os.PathLike) -> bool:
        """Add a crate for ``path`` if it is a .rs file; report whether it was added."""
        path = Path(path)
        if path.suffix != ".rs":
            return False
        self.crates.append(Crate(root_module=str(path)))
        return True

    def exercises_to_json(self, root: str | os.PathLike = "./exercises") -> None:
        """Add a crate for every .rs file below ``root``."""
        for path in sorted(Path(root).rglob("*")):
            self.add_path(path)

    def get_sysroot_src(self) -> None:
        """Find the standard library sources, from RUST_SRC_PATH or rustc."""
        env_path = os.environ.get("RUST_SRC_PATH")
        if env_path is not None:
            self.sysroot_src = env_path
            return

        result = subprocess.run(["rustc", "--print", "sysroot"], capture_output=True)
        output = (result.stdout or b"").decode("utf-8", errors="replace")
        tokens = output.split()
        toolchain = tokens[0] if tokens else output

        print(f"Determined toolchain: {toolchain}\n")

        self.sysroot_src = str(Path(toolchain) / "lib" / "rustlib" / "src" / "rust" / "library")