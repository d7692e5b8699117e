"""
Общие фикстуры pytest.

Go-деревья создаются во временной директории; go.mod кладётся туда же,
рабочая директория подменяется через monkeypatch там, где это нужно.
"""

import json
from pathlib import Path

import pytest

HANDLERS_GO = """package handlers

import "github.com/e4coder/flow"

func Alpha(ctx *flow.ProcessContext, in []flow.DefinedInput) error {
	return nil
}

func Beta(c *flow.ProcessContext, inputs []flow.DefinedInput) (any, error) {
	return nil, nil
}

func helper(x int) int {
	return x
}
"""

BROKEN_GO = """package handlers

func Broken(ctx *flow.ProcessContext, in []flow.DefinedInput {
	return nil
"""


def write_go(root: Path, rel_path: str, content: str) -> Path:
    path = root / rel_path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def handlers_dir(tmp_path: Path) -> Path:
    """Пакет handlers с двумя подходящими функциями и одной неподходящей."""
    root = tmp_path / "handlers"
    write_go(root, "handlers.go", HANDLERS_GO)
    return root


@pytest.fixture
def go_project(tmp_path: Path, handlers_dir: Path) -> Path:
    """Модуль example.org/widgets с конфигом flowgen."""
    (tmp_path / "go.mod").write_text(
        "module example.org/widgets\n\ngo 1.22\n", encoding="utf-8"
    )
    (tmp_path / "flowconfig.json").write_text(
        json.dumps({"dir_name": "handlers", "out_dir": "gen/output"}),
        encoding="utf-8",
    )
    return tmp_path


@pytest.fixture
def go_file():
    """Функция записи Go-файла: go_file(root, "a/b.go", source)."""
    return write_go


@pytest.fixture
def broken_source() -> str:
    return BROKEN_GO
