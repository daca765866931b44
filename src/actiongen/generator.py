from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from .generation import NamingConventions, generate_actions
from .model import CompilationUnit

GENERATOR_NAME = "ReduxActionsGenerator"


@dataclass(frozen=True)
class PartFileSpec:
    output_dir: Path


def generate_part_file(
    spec: PartFileSpec,
    unit: CompilationUnit,
    conventions: NamingConventions | None = None,
) -> Path | None:
    """Write the generated part file for a compilation unit.

    Returns:
        The path of the written file, or None when nothing qualified
    """
    output = generate_actions(unit, conventions)
    if not output.code:
        return None
    spec.output_dir.mkdir(parents=True, exist_ok=True)
    path = spec.output_dir / part_file_name(unit.name)
    path.write_text(part_file_content(unit.name, output.code), encoding="utf-8")
    return path


def part_file_name(library: str) -> str:
    """Get the part file name for a library (e.g., "counter.dart" -> "counter.g.dart")."""
    stem = PurePosixPath(library).name
    if stem.endswith(".dart"):
        stem = stem[: -len(".dart")]
    return f"{stem}.g.dart"


def part_file_content(library: str, code: str) -> str:
    lines = [
        "// GENERATED CODE - DO NOT MODIFY BY HAND",
        "",
        f"part of '{PurePosixPath(library).name}';",
        "",
        "// " + "*" * 74,
        f"// {GENERATOR_NAME}",
        "// " + "*" * 74,
        "",
        "",
    ]
    return "\n".join(lines) + code
