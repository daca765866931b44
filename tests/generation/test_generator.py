from __future__ import annotations

from pathlib import Path

from actiongen.generator import PartFileSpec, generate_part_file, part_file_name
from actiongen.model import CompilationUnit, Constructor, Declaration


class TestGeneratePartFile:
    def test_writes_part_file(self, tmp_path: Path, redux_actions: Declaration) -> None:
        unit = CompilationUnit(
            "lib/counter.dart",
            (Declaration(name="CounterActions", constructors=(Constructor(),), supertypes=(redux_actions,)),),
        )
        path = generate_part_file(PartFileSpec(output_dir=tmp_path / "out"), unit)
        assert path == tmp_path / "out" / "counter.g.dart"
        contents = path.read_text(encoding="utf-8")
        assert contents.startswith("// GENERATED CODE - DO NOT MODIFY BY HAND\n\npart of 'counter.dart';\n")
        assert "// ReduxActionsGenerator\n" in contents
        assert contents.endswith("class CounterActionsNames {\n}\n")

    def test_skips_unit_without_actions(self, tmp_path: Path) -> None:
        unit = CompilationUnit("plain.dart", (Declaration(name="Plain"),))
        assert generate_part_file(PartFileSpec(output_dir=tmp_path), unit) is None
        assert list(tmp_path.iterdir()) == []


class TestPartFileName:
    def test_replaces_dart_suffix(self) -> None:
        assert part_file_name("counter.dart") == "counter.g.dart"
        assert part_file_name("lib/src/app_actions.dart") == "app_actions.g.dart"
        assert part_file_name("actions") == "actions.g.dart"
