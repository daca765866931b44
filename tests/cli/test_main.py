from __future__ import annotations

import json
from pathlib import Path

import pytest

from actiongen.__main__ import main


class TestCLI:
    def test_generates_part_file(self, tmp_path: Path, minimal_model_document: dict[str, object]) -> None:
        model_path = tmp_path / "counter.json"
        model_path.write_text(json.dumps(minimal_model_document), encoding="utf-8")
        output_dir = tmp_path / "out"
        result = main([str(model_path), "--output-dir", str(output_dir)])
        assert result == 0
        contents = (output_dir / "counter.g.dart").read_text(encoding="utf-8")
        assert "class CounterActionsNames {" in contents

    def test_prints_to_stdout(
        self,
        tmp_path: Path,
        minimal_model_document: dict[str, object],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        model_path = tmp_path / "counter.json"
        model_path.write_text(json.dumps(minimal_model_document), encoding="utf-8")
        result = main([str(model_path), "--stdout", "--output-dir", str(tmp_path / "out")])
        assert result == 0
        captured = capsys.readouterr()
        expected = "static final ActionName<int> increment = new ActionName<int>('CounterActions-increment');"
        assert expected in captured.out
        assert not (tmp_path / "out").exists()

    def test_custom_container_marker(
        self,
        tmp_path: Path,
        minimal_model_document: dict[str, object],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        model_path = tmp_path / "counter.json"
        model_path.write_text(json.dumps(minimal_model_document), encoding="utf-8")
        result = main([str(model_path), "--stdout", "--container-marker", "StoreActions"])
        assert result == 0
        assert capsys.readouterr().out == ""

    @pytest.mark.parametrize(
        "model_contents",
        [
            pytest.param("{}", id="missing-library"),
            pytest.param("[]", id="non-object"),
        ],
    )
    def test_invalid_model_returns_error(self, tmp_path: Path, model_contents: str) -> None:
        model_path = tmp_path / "model.json"
        model_path.write_text(model_contents, encoding="utf-8")
        result = main([str(model_path), "--output-dir", str(tmp_path / "out")])
        assert result == 1

    def test_missing_model_returns_error(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        result = main([str(tmp_path / "missing.json")])
        assert result == 1
        assert capsys.readouterr().err.startswith("error:")
