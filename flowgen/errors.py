"""Таксономия ошибок flowgen."""


class FlowgenError(Exception):
    """
    Базовая ошибка шага пайплайна.

    Каждый подкласс несёт фиксированный маркер категории, который
    выводится перед контекстным сообщением.
    """

    category = "critical process failure"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.category}: {self.message}"


class ConfigError(FlowgenError):
    category = "critical config failure"


class DirectoryError(FlowgenError):
    category = "directory reading error"


class ExtractError(FlowgenError):
    category = "critical extracting failure"


class PackageResolutionError(FlowgenError):
    category = "invalid package name"


class ModuleResolutionError(FlowgenError):
    category = "critical go.mod error"


class OutputError(FlowgenError):
    category = "critical output creation failure"


class ScanError(Exception):
    """Сканирование прервано ошибкой файловой системы или парсинга."""

    def __init__(self, path: str, cause: Exception | str):
        self.path = path
        self.cause = cause
        super().__init__(f"{path}: {cause}")


class ResolveError(Exception):
    """Не удалось определить имя пакета или путь модуля."""


class GenerateError(Exception):
    """Не удалось записать файл реестра."""


def format_error_chain(exc: BaseException) -> str:
    """
    Развернуть цепочку исключений по __cause__ в многострочный текст.

    Returns:
        Строки вида "категория: контекст", затем причины, по одной на строку
    """
    lines = []
    seen = set()
    current: BaseException | None = exc

    while current is not None and id(current) not in seen:
        seen.add(id(current))
        text = str(current) or type(current).__name__
        if text not in lines:
            lines.append(text)
        current = current.__cause__

    return "\n".join(lines)
