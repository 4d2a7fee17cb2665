"""
File-system collaborators: finding GIR files, reading them and writing
the generated declarations.
"""

from __future__ import annotations

import glob
import os
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from typing import NamedTuple

GIR_PATHS = ["/usr/share/gir-1.0/*.gir", "/usr/share/*/gir-1.0/*.gir"]
OUTPUT_DIR_ENV = "GIR_TYPEDEF_DIR"


class GirFile(NamedTuple):
    name: str  # Module name, e.g. "Gtk" for Gtk-3.0.gir
    path: Path


def module_name(path: str | Path) -> str | None:
    """Module name of a GIR file with its "-<version>" suffix removed, or None without one."""
    stem = Path(path).name.removesuffix(".gir")
    name, sep, _version = stem.rpartition("-")
    if not sep or not name:
        return None
    return name


def iter_gir_files(patterns: Iterable[str] = GIR_PATHS) -> Iterator[GirFile]:
    """Yield every GIR file matching the glob patterns, skipping unversioned names."""
    for pattern in patterns:
        for path in sorted(glob.glob(pattern)):
            name = module_name(path)
            if name is None:
                continue
            yield GirFile(name=name, path=Path(path))


def read_text(path: str | Path) -> str:
    with open(path, encoding="utf-8") as f:
        return f.read()


def write_text(path: str | Path, text: str) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)


def resolve_output_dir(environ: Mapping[str, str] | None = None) -> Path:
    """Directory for generated files: $GIR_TYPEDEF_DIR/types, defaulting to ./types."""
    environ = os.environ if environ is None else environ
    return Path(environ.get(OUTPUT_DIR_ENV) or ".") / "types"
