"""Тесты генератора реестра."""

from pathlib import Path

import pytest

from flowgen.errors import GenerateError
from flowgen.services.registry import RegistryGenerator, ScanConfig
from flowgen.services.registry.generator import make_alias
from flowgen.services.registry.models import ImportPath

IMPORT_PATH = ImportPath("example.org/widgets", "handlers")


@pytest.fixture
def generator() -> RegistryGenerator:
    return RegistryGenerator()


def test_generated_file_layout(generator, tmp_path: Path) -> None:
    out_file = generator.generate(
        tmp_path / "out", "handlers", {"Beta": "Beta", "Alpha": "Alpha"}, IMPORT_PATH
    )

    assert out_file == tmp_path / "out" / "out.go"
    content = out_file.read_text(encoding="utf-8")

    assert content.startswith("// Code generated by flowgen. DO NOT EDIT.\n")
    assert "package output\n" in content
    assert '\t"github.com/e4coder/flow"\n' in content
    assert '\thandlers "example.org/widgets/handlers"\n' in content
    assert "funcs map[string]flow.ProcessHandler\n" in content
    assert content.index('"Alpha": handlers.Alpha,') < content.index(
        '"Beta": handlers.Beta,'
    )


def test_lookup_reports_not_found_distinctly(generator) -> None:
    content = generator.render("handlers", {"Alpha": "Alpha"}, IMPORT_PATH)

    assert 'var ErrFuncNotFound = errors.New("function not found")' in content
    assert (
        "func (r *Registry) GetFuncByName(name string) (flow.ProcessHandler, error) {"
        in content
    )
    assert 'return nil, fmt.Errorf("%w: %s", ErrFuncNotFound, name)' in content
    assert "return fn, nil" in content


def test_generation_is_deterministic(generator, tmp_path: Path) -> None:
    entries = {name: name for name in ("Gamma", "Alpha", "Beta")}
    reordered = {name: name for name in ("Beta", "Gamma", "Alpha")}

    first = generator.generate(tmp_path / "a", "handlers", entries, IMPORT_PATH)
    second = generator.generate(tmp_path / "b", "handlers", reordered, IMPORT_PATH)

    assert first.read_bytes() == second.read_bytes()


def test_existing_file_is_overwritten(generator, tmp_path: Path) -> None:
    out_dir = tmp_path / "deep" / "nested" / "out"
    out_dir.mkdir(parents=True)
    (out_dir / "out.go").write_text("stale", encoding="utf-8")

    out_file = generator.generate(out_dir, "handlers", {"Alpha": "Alpha"}, IMPORT_PATH)

    assert "stale" not in out_file.read_text(encoding="utf-8")


def test_empty_registry_omits_package_import(generator) -> None:
    content = generator.render("handlers", {}, IMPORT_PATH)

    assert "example.org/widgets/handlers" not in content
    assert "funcs: map[string]flow.ProcessHandler{\n\t\t},\n" in content


def test_unexported_functions_are_skipped(generator) -> None:
    content = generator.render("handlers", {"hidden": "hidden", "Shown": "Shown"}, IMPORT_PATH)

    assert "handlers.Shown" in content
    assert "hidden" not in content


def test_custom_package_and_file_name(tmp_path: Path) -> None:
    config = ScanConfig(out_file="registry_gen.go", out_package="registry")
    out_file = RegistryGenerator(config).generate(
        tmp_path, "handlers", {"Alpha": "Alpha"}, IMPORT_PATH
    )

    assert out_file.name == "registry_gen.go"
    assert "package registry\n" in out_file.read_text(encoding="utf-8")


def test_alias_differs_from_declared_package(generator) -> None:
    """Алиас = имя директории, импорт записан с явным алиасом."""
    content = generator.render(
        "my-handlers", {"Alpha": "Alpha"}, ImportPath("example.org/widgets", "handlers")
    )

    assert '\tmy_handlers "example.org/widgets/handlers"\n' in content
    assert '"Alpha": my_handlers.Alpha,' in content


@pytest.mark.parametrize(
    "dir_name, alias",
    [
        ("handlers", "handlers"),
        ("my-handlers", "my_handlers"),
        ("2fa", "_2fa"),
        ("fmt", "fmtpkg"),
        ("flow", "flowpkg"),
        ("type", "typepkg"),
        ("error", "errorpkg"),
        ("string", "stringpkg"),
        ("nil", "nilpkg"),
        ("len", "lenpkg"),
        ("", "pkg"),
    ],
)
def test_make_alias(dir_name, alias) -> None:
    assert make_alias(dir_name) == alias


def test_output_dir_that_is_a_file_fails(generator, tmp_path: Path) -> None:
    blocker = tmp_path / "out"
    blocker.write_text("not a directory", encoding="utf-8")

    with pytest.raises(GenerateError, match="failed to create output directory"):
        generator.generate(blocker, "handlers", {"Alpha": "Alpha"}, IMPORT_PATH)


def test_builtin_named_directory_keeps_error_type_intact(generator) -> None:
    content = generator.render("error", {"A": "A"}, ImportPath("x", "y"))

    assert '\terrorpkg "x/y"\n' in content
    assert '"A": errorpkg.A,' in content
    assert "\terror " not in content
