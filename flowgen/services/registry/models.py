"""Модели данных для поиска flow-функций."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Named:
    """Именованный тип, опционально с квалификатором пакета."""

    name: str
    qualifier: str | None = None


@dataclass(frozen=True)
class Pointer:
    """Указатель на вложенный тип."""

    inner: "TypeShape"


@dataclass(frozen=True)
class Sequence:
    """Слайс вложенного типа."""

    inner: "TypeShape"


@dataclass(frozen=True)
class Opaque:
    """Любая другая форма типа (map, chan, массив, generic, variadic...)."""

    text: str


TypeShape = Named | Pointer | Sequence | Opaque


@dataclass(frozen=True)
class FunctionDeclaration:
    """Функция верхнего уровня."""

    name: str
    params: tuple[TypeShape, ...]
    line: int


@dataclass(frozen=True)
class SyntaxIssue:
    """Синтаксическая ошибка, найденная парсером."""

    line: int
    column: int
    kind: str  # ERROR или MISSING <token>

    def __str__(self) -> str:
        return f"{self.line}:{self.column}: {self.kind}"


@dataclass
class ParsedFile:
    """Результат парсинга файла."""

    package: str | None
    functions: list[FunctionDeclaration] = field(default_factory=list)
    issues: list[SyntaxIssue] = field(default_factory=list)


@dataclass(frozen=True)
class ImportPath:
    """Полный путь импорта сканируемого пакета."""

    base_path: str
    package_name: str

    def __str__(self) -> str:
        return f"{self.base_path}/{self.package_name}"
