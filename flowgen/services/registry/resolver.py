"""Определение имени пакета и базового пути модуля."""

import os
import logging
from pathlib import Path

from flowgen.constants import MANIFEST_NAME, MODULE_KEYWORD
from flowgen.errors import ResolveError, ScanError
from .config import ScanConfig
from .file_scanner import FileScanner
from .ast_parser import GoParser

logger = logging.getLogger(__name__)


class PathResolver:
    """Резолв пути импорта сканируемого пакета."""

    def __init__(self, config: ScanConfig | None = None, parser: GoParser | None = None):
        self.config = config if config is not None else ScanConfig()
        self.parser = parser if parser is not None else GoParser()

    def resolve_package_name(self, root_dir: str) -> str:
        """
        Имя пакета из первого найденного исходника.

        Остальные файлы той же директории должны объявлять тот же пакет
        (внешний тестовый пакет <name>_test допускается).

        Raises:
            ResolveError: исходников нет, нет package или пакеты смешаны
        """
        try:
            groups = FileScanner(root_dir, self.config).group_by_directory()
        except ScanError as e:
            raise ResolveError(f"error walking {root_dir}") from e

        if not groups:
            raise ResolveError(f"no Go files found in directory: {root_dir}")

        first_dir = groups[0]
        package_name = self._read_package(root_dir, first_dir[0])
        if package_name is None:
            raise ResolveError(
                f"no package clause in {os.path.join(root_dir, first_dir[0])}"
            )

        for rel_path in first_dir[1:]:
            other = self._read_package(root_dir, rel_path)
            if other not in (package_name, f"{package_name}_test"):
                raise ResolveError(
                    f"mixed packages in {os.path.dirname(os.path.join(root_dir, rel_path))}: "
                    f"{first_dir[0]} declares {package_name!r}, {rel_path} declares {other!r}"
                )

        logger.info(f"[Resolver] Package name: {package_name}")
        return package_name

    def resolve_module_base_path(self, cwd: str | Path) -> str:
        """
        Базовый путь модуля из go.mod в cwd.

        Raises:
            ResolveError: go.mod нет, не читается или без строки module
        """
        manifest = Path(cwd) / MANIFEST_NAME
        if not manifest.is_file():
            raise ResolveError(f"{MANIFEST_NAME} file not found in the directory: {cwd}")

        try:
            with open(manifest, encoding="utf-8") as f:
                for line in f:
                    base_path = self._parse_module_line(line)
                    if base_path:
                        logger.info(f"[Resolver] Module base path: {base_path}")
                        return base_path
        except OSError as e:
            raise ResolveError(f"error reading {manifest}") from e

        raise ResolveError(f"module name not found in {manifest}")

    def _read_package(self, root_dir: str, rel_path: str) -> str | None:
        full_path = os.path.join(root_dir, rel_path)
        try:
            with open(full_path, "rb") as f:
                content = f.read()
        except OSError as e:
            raise ResolveError(f"error reading {full_path}") from e

        try:
            content.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ResolveError(f"{full_path} is not valid UTF-8") from e

        return self.parser.parse_package_name(content)

    @staticmethod
    def _parse_module_line(line: str) -> str | None:
        """'module example.org/x // comment' -> 'example.org/x'."""
        if not line.startswith(MODULE_KEYWORD):
            return None

        rest = line[len(MODULE_KEYWORD):]
        if not rest[:1].isspace():
            return None

        rest = rest.split("//", 1)[0].strip()
        if len(rest) >= 2 and rest[0] == rest[-1] == '"':
            rest = rest[1:-1]

        return rest or None
