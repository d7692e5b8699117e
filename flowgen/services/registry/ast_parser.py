"""Парсинг Go-исходников через tree-sitter."""

import logging

from tree_sitter_language_pack import get_parser

from .models import FunctionDeclaration, Opaque, ParsedFile, SyntaxIssue
from .type_shapes import shape_from_node

logger = logging.getLogger(__name__)

PARAMETER_NODES = ("parameter_declaration", "variadic_parameter_declaration")


class GoParser:
    """Парсер для извлечения функций верхнего уровня и имени пакета."""

    def __init__(self):
        self._parser = get_parser("go")

    def parse_file(self, content: bytes) -> ParsedFile:
        """
        Парсинг файла с восстановлением после синтаксических ошибок.

        Returns:
            ParsedFile с пакетом, функциями и найденными ошибками
        """
        root = self._parser.parse(content).root_node

        return ParsedFile(
            package=self._extract_package(root),
            functions=self._extract_functions(root),
            issues=self._collect_issues(root) if root.has_error else [],
        )

    def parse_package_name(self, content: bytes) -> str | None:
        """Прочитать только объявление пакета."""
        root = self._parser.parse(content).root_node
        return self._extract_package(root)

    def _extract_package(self, root) -> str | None:
        for child in root.children:
            if child.type == "package_clause":
                for sub in child.named_children:
                    if sub.type == "package_identifier":
                        return sub.text.decode()
        return None

    def _extract_functions(self, root) -> list[FunctionDeclaration]:
        """Только прямые потомки корня: методы и вложенные литералы не нужны."""
        functions = []

        for child in root.children:
            if child.type == "method_declaration":
                name_node = child.child_by_field_name("name")
                if name_node:
                    logger.debug(f"[Parser] Skipping method {name_node.text.decode()}")
                continue

            if child.type != "function_declaration":
                continue

            name_node = child.child_by_field_name("name")
            if not name_node:
                continue

            # Generic-функцию нельзя использовать без инстанцирования
            if child.child_by_field_name("type_parameters") is not None:
                logger.debug(f"[Parser] Skipping generic {name_node.text.decode()}")
                continue

            functions.append(
                FunctionDeclaration(
                    name=name_node.text.decode(),
                    params=tuple(self._extract_params(child)),
                    line=child.start_point[0] + 1,
                )
            )

        return functions

    def _extract_params(self, func_node) -> list:
        """
        Развернуть список параметров: по одной форме на каждое имя.

        (a, b T) даёт два параметра, безымянный параметр даёт один.
        """
        params = []
        param_list = func_node.child_by_field_name("parameters")
        if param_list is None:
            return params

        for decl in param_list.named_children:
            if decl.type not in PARAMETER_NODES:
                continue

            type_node = decl.child_by_field_name("type")
            if decl.type == "variadic_parameter_declaration":
                shape = Opaque(decl.text.decode())
            elif type_node is not None:
                shape = shape_from_node(type_node)
            else:
                shape = Opaque(decl.text.decode())

            names = decl.children_by_field_name("name")
            params.extend([shape] * max(len(names), 1))

        return params

    def _collect_issues(self, root) -> list[SyntaxIssue]:
        """Собрать узлы ERROR и MISSING."""
        issues = []

        def visit(n):
            if n.type == "ERROR" or n.is_missing:
                kind = "ERROR" if n.type == "ERROR" else f"MISSING {n.type}"
                issues.append(
                    SyntaxIssue(
                        line=n.start_point[0] + 1,
                        column=n.start_point[1] + 1,
                        kind=kind,
                    )
                )
                if n.type == "ERROR":
                    return

            if n.has_error:
                for child in n.children:
                    visit(child)

        visit(root)
        if not issues:
            issues.append(SyntaxIssue(line=1, column=1, kind="ERROR"))
        return issues
