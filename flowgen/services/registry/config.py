"""Конфигурация поиска flow-функций."""

from dataclasses import dataclass, field

from flowgen.constants import (
    CONTEXT_TYPE,
    DEFAULT_OUT_FILE,
    DEFAULT_OUT_PACKAGE,
    INPUT_TYPE,
    SOURCE_SUFFIX,
)


@dataclass
class ScanConfig:
    """Конфигурация сканирования и генерации."""

    # Ожидаемые типы параметров по порядку
    param_types: tuple[str, ...] = (CONTEXT_TYPE, INPUT_TYPE)

    # Расширение исходников
    source_suffix: str = SOURCE_SUFFIX

    # Паттерны исключения в формате .gitignore (относительно корня)
    exclude: list[str] = field(default_factory=list)

    # Любая синтаксическая ошибка прерывает сканирование
    strict_parse: bool = True

    # Сгенерированный файл
    out_file: str = DEFAULT_OUT_FILE
    out_package: str = DEFAULT_OUT_PACKAGE
