"""Генерация Go-файла реестра функций."""

import re
import logging
from pathlib import Path

from flowgen.constants import HANDLER_TYPE, RUNTIME_IMPORT
from flowgen.errors import GenerateError
from .config import ScanConfig
from .models import ImportPath
from .templates import (
    ENTRY_TEMPLATE,
    REGISTRY_TEMPLATE,
    RESERVED_IDENTIFIERS,
    SCANNED_IMPORT_TEMPLATE,
)

logger = logging.getLogger(__name__)


class RegistryGenerator:
    """Генератор детерминированного файла реестра."""

    def __init__(self, config: ScanConfig | None = None):
        self.config = config if config is not None else ScanConfig()

    def generate(
        self,
        out_dir: str | Path,
        scanned_dir_name: str,
        entries: dict[str, str],
        import_path: ImportPath | str,
    ) -> Path:
        """
        Записать файл реестра в out_dir (перезаписывая существующий).

        Args:
            out_dir: директория вывода, создаётся при необходимости
            scanned_dir_name: базовое имя сканируемой директории, алиас импорта
            entries: словарь {имя: имя} из сканера
            import_path: полный путь импорта сканируемого пакета

        Returns:
            Путь к записанному файлу

        Raises:
            GenerateError: не удалось создать директорию или записать файл
        """
        out_path = Path(out_dir)
        try:
            out_path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise GenerateError(f"failed to create output directory {out_path}") from e

        content = self.render(scanned_dir_name, entries, import_path)

        out_file = out_path / self.config.out_file
        try:
            out_file.write_text(content, encoding="utf-8")
        except OSError as e:
            raise GenerateError(f"failed to write {out_file}") from e

        logger.info(f"[Generator] Wrote {out_file}")
        return out_file

    def render(
        self,
        scanned_dir_name: str,
        entries: dict[str, str],
        import_path: ImportPath | str,
    ) -> str:
        """Собрать исходник реестра; записи идут в отсортированном порядке."""
        alias = make_alias(scanned_dir_name)
        names = self._registrable_names(entries)

        scanned_import = ""
        if names:
            scanned_import = SCANNED_IMPORT_TEMPLATE.format(
                alias=alias, import_path=str(import_path)
            )

        return REGISTRY_TEMPLATE.format(
            package=self.config.out_package,
            runtime_import=RUNTIME_IMPORT,
            scanned_import=scanned_import,
            handler_type=HANDLER_TYPE,
            entries="".join(
                ENTRY_TEMPLATE.format(name=name, alias=alias) for name in names
            ),
        )

    def _registrable_names(self, entries: dict[str, str]) -> list[str]:
        """Неэкспортируемые функции недоступны из другого пакета."""
        names = []
        for name in sorted(entries):
            if not name[:1].isupper():
                logger.warning(f"[Generator] Skipping unexported function {name}")
                continue
            names.append(name)
        return names


def make_alias(dir_name: str) -> str:
    """
    Превратить имя директории в Go-идентификатор для алиаса импорта.

    'my-handlers' -> 'my_handlers', '2fa' -> '_2fa', 'fmt' -> 'fmtpkg'.
    """
    alias = re.sub(r"\W", "_", dir_name) or "pkg"
    if alias[0].isdigit():
        alias = f"_{alias}"
    if alias in RESERVED_IDENTIFIERS or alias == "_":
        alias = f"{alias}pkg"
    return alias
