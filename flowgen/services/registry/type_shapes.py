"""Структурное сравнение форм типов параметров."""

import re

from .models import Named, Opaque, Pointer, Sequence, TypeShape

_NAMED_RE = re.compile(r"^([A-Za-z_]\w*)(?:\.([A-Za-z_]\w*))?$")


def parse_shape(text: str) -> TypeShape:
    """
    Разобрать текстовое выражение типа Go в форму.

    Поддерживаются *T, []T, (T), pkg.Name и Name.

    Raises:
        ValueError: выражение не поддерживается
    """
    expr = text.strip()

    if expr.startswith("*"):
        return Pointer(parse_shape(expr[1:]))
    if expr.startswith("[]"):
        return Sequence(parse_shape(expr[2:]))
    if expr.startswith("(") and expr.endswith(")"):
        return parse_shape(expr[1:-1])

    match = _NAMED_RE.match(expr)
    if not match:
        raise ValueError(f"unsupported type expression: {text!r}")

    if match.group(2) is None:
        return Named(match.group(1))
    return Named(match.group(2), qualifier=match.group(1))


def shape_from_node(node) -> TypeShape:
    """Построить форму из узла типа tree-sitter."""
    kind = node.type

    if kind == "type_identifier":
        return Named(_text(node))

    if kind == "qualified_type":
        package = node.child_by_field_name("package")
        name = node.child_by_field_name("name")
        if package and name:
            return Named(_text(name), qualifier=_text(package))

    elif kind == "pointer_type":
        inner = _first_type_child(node)
        if inner:
            return Pointer(shape_from_node(inner))

    elif kind == "slice_type":
        element = node.child_by_field_name("element")
        if element:
            return Sequence(shape_from_node(element))

    elif kind == "parenthesized_type":
        inner = _first_type_child(node)
        if inner:
            return shape_from_node(inner)

    return Opaque(_text(node))


def shape_matches(expected: TypeShape, actual: TypeShape) -> bool:
    """
    Рекурсивно сравнить ожидаемую форму с фактической.

    Квалификатор Named проверяется, только если он задан в ожидаемой форме.
    """
    if isinstance(expected, Pointer):
        return isinstance(actual, Pointer) and shape_matches(expected.inner, actual.inner)

    if isinstance(expected, Sequence):
        return isinstance(actual, Sequence) and shape_matches(
            expected.inner, actual.inner
        )

    if isinstance(expected, Named):
        if not isinstance(actual, Named) or actual.name != expected.name:
            return False
        return expected.qualifier is None or actual.qualifier == expected.qualifier

    return False


class SignatureMatcher:
    """Проверка списка параметров на заданную сигнатуру."""

    def __init__(self, expected: tuple[TypeShape, ...]):
        self.expected = expected

    @classmethod
    def from_types(cls, *type_exprs: str) -> "SignatureMatcher":
        return cls(tuple(parse_shape(expr) for expr in type_exprs))

    def matches(self, params) -> bool:
        """Совпадает ли арность и каждый параметр по порядку."""
        if len(params) != len(self.expected):
            return False

        return all(
            shape_matches(expected, actual)
            for expected, actual in zip(self.expected, params)
        )


def _first_type_child(node):
    for child in node.named_children:
        if child.type != "comment":
            return child
    return None


def _text(node) -> str:
    return node.text.decode()
