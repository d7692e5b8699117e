"""Сканер объявлений: поиск функций с flow-сигнатурой (фасад)."""

import os
import logging

from flowgen.errors import ScanError
from .config import ScanConfig
from .file_scanner import FileScanner
from .ast_parser import GoParser
from .models import ParsedFile
from .type_shapes import SignatureMatcher

logger = logging.getLogger(__name__)


class DeclarationScanner:
    """Сервис для поиска функций, подходящих под сигнатуру реестра."""

    def __init__(self, config: ScanConfig | None = None, parser: GoParser | None = None):
        self.config = config if config is not None else ScanConfig()
        self.parser = parser if parser is not None else GoParser()
        self.matcher = SignatureMatcher.from_types(*self.config.param_types)

    def scan(self, root_dir: str) -> dict[str, str]:
        """
        Найти подходящие функции во всех исходниках под root_dir.

        Returns:
            словарь {имя функции: имя функции}

        Raises:
            ScanError: ошибка чтения или синтаксическая ошибка в строгом режиме
        """
        logger.info(f"[Scanner] Scanning {root_dir}...")

        files = FileScanner(root_dir, self.config).scan()
        func_map: dict[str, str] = {}
        origins: dict[str, str] = {}

        for rel_path in files:
            full_path = os.path.join(root_dir, rel_path)
            parsed = self._parse(full_path)

            for func in parsed.functions:
                if not self.matcher.matches(func.params):
                    continue

                if func.name in origins:
                    logger.warning(
                        f"[Scanner] {func.name} in {rel_path}:{func.line} "
                        f"overrides the one from {origins[func.name]}"
                    )

                logger.debug(f"[Scanner] Matched {func.name} in {rel_path}:{func.line}")
                func_map[func.name] = func.name
                origins[func.name] = f"{rel_path}:{func.line}"

        logger.info(
            f"[Scanner] Found {len(func_map)} functions in {len(files)} files"
        )
        return func_map

    def _parse(self, full_path: str) -> ParsedFile:
        """Прочитать и распарсить файл с учётом политики ошибок."""
        try:
            with open(full_path, "rb") as f:
                content = f.read()
        except OSError as e:
            raise ScanError(full_path, e) from e

        # Исходники Go обязаны быть в UTF-8
        try:
            content.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ScanError(full_path, e) from e

        parsed = self.parser.parse_file(content)

        if parsed.issues:
            first = parsed.issues[0]
            if self.config.strict_parse:
                raise ScanError(full_path, f"syntax error at {first}")

            logger.warning(
                f"[Scanner] {full_path}: {len(parsed.issues)} syntax errors, "
                f"first at {first}; using recovered declarations"
            )

        return parsed
