"""Сканирование Go-исходников с поддержкой паттернов исключения."""

import os
import logging

import pathspec

from flowgen.errors import ScanError
from .config import ScanConfig

logger = logging.getLogger(__name__)


class FileScanner:
    """Детерминированный рекурсивный обход директории."""

    def __init__(self, root_path: str, config: ScanConfig):
        self.root_path = root_path
        self.config = config
        self._exclude_spec = self._load_exclude()

    def _load_exclude(self) -> pathspec.PathSpec | None:
        """Скомпилировать паттерны исключения."""
        if not self.config.exclude:
            return None
        return pathspec.PathSpec.from_lines("gitwildmatch", self.config.exclude)

    def scan(self) -> list[str]:
        """
        Сканировать директорию и вернуть исходники в порядке обхода.

        Returns:
            Список относительных путей к файлам

        Raises:
            ScanError: ошибка чтения директории
        """
        logger.debug(f"[Scanner] Walking {self.root_path}")
        files = []

        for root, dirs, filenames in os.walk(self.root_path, onerror=self._on_error):
            rel_root = os.path.relpath(root, self.root_path)

            # Сортируем на месте, чтобы os.walk спускался в том же порядке
            dirs[:] = self._filter_directories(sorted(dirs), rel_root)

            for filename in sorted(filenames):
                if self._should_include_file(filename, rel_root):
                    files.append(os.path.normpath(os.path.join(rel_root, filename)))

        logger.debug(f"[Scanner] Found {len(files)} source files")
        return files

    def group_by_directory(self) -> list[list[str]]:
        """Исходники, сгруппированные по директориям, в порядке обхода."""
        groups: dict[str, list[str]] = {}
        for rel_path in self.scan():
            groups.setdefault(os.path.dirname(rel_path), []).append(rel_path)
        return list(groups.values())

    def _on_error(self, error: OSError) -> None:
        raise ScanError(error.filename or self.root_path, error)

    def _filter_directories(self, dirs: list[str], rel_root: str) -> list[str]:
        """Фильтровать директории по паттернам исключения."""
        if not self._exclude_spec:
            return dirs

        return [
            d
            for d in dirs
            if not self._exclude_spec.match_file(self._rel(rel_root, d) + "/")
        ]

    def _should_include_file(self, filename: str, rel_root: str) -> bool:
        """Проверить, нужно ли включать файл в анализ."""
        if not filename.endswith(self.config.source_suffix):
            return False

        if self._exclude_spec and self._exclude_spec.match_file(
            self._rel(rel_root, filename)
        ):
            return False

        return True

    @staticmethod
    def _rel(rel_root: str, name: str) -> str:
        if rel_root == ".":
            return name
        return f"{rel_root}/{name}".replace(os.sep, "/")
