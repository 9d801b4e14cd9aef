"""Tests for the ``tree_inorder`` CLI demonstration script."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

import pytest

import tree_inorder


def test_cli_outputs_default_traversal(capsys) -> None:
    assert tree_inorder.main([]) == 0
    captured = capsys.readouterr()
    assert captured.out == "Inorder traversal: 4 2 5 1 6 3 7 \n"


def test_cli_iterative_output_is_identical(capsys) -> None:
    assert tree_inorder.main(["--iterative"]) == 0
    assert capsys.readouterr().out == "Inorder traversal: 4 2 5 1 6 3 7 \n"


def test_cli_accepts_custom_values(capsys) -> None:
    assert tree_inorder.main(["--values", "42"]) == 0
    assert capsys.readouterr().out == "Inorder traversal: 42 \n"


def test_cli_empty_values_prints_label_only(capsys) -> None:
    assert tree_inorder.main(["--values", ""]) == 0
    assert capsys.readouterr().out == "Inorder traversal: \n"


def test_cli_render_appends_levels(capsys) -> None:
    assert tree_inorder.main(["--values", "1,2,3", "--render"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["Inorder traversal: 2 1 3 ", "1", "2 3"]


def test_cli_rejects_invalid_values(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        tree_inorder.main(["--values", "1,two"])
    assert excinfo.value.code == 2
    assert "Failed to parse integer payloads" in capsys.readouterr().err


def test_script_entry_point_exit_status() -> None:
    script = Path(__file__).parents[2] / "tree_inorder.py"
    completed = subprocess.run(
        [sys.executable, str(script)],
        check=False,
        capture_output=True,
        text=True,
        cwd=script.parent,
    )
    assert completed.returncode == 0
    assert completed.stdout == "Inorder traversal: 4 2 5 1 6 3 7 \n"
