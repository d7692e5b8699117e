"""Шаблоны сгенерированного Go-кода реестра."""

REGISTRY_TEMPLATE = """// Code generated by flowgen. DO NOT EDIT.

package {package}

import (
	"errors"
	"fmt"

	"{runtime_import}"{scanned_import}
)

// ErrFuncNotFound is returned by GetFuncByName for names that are not registered.
var ErrFuncNotFound = errors.New("function not found")

// Registry maps function names to flow handlers. It is read-only once built.
type Registry struct {{
	funcs map[string]{handler_type}
}}

// NewRegistry builds a Registry holding every scanned function.
func NewRegistry() *Registry {{
	return &Registry{{
		funcs: map[string]{handler_type}{{
{entries}		}},
	}}
}}

// GetFuncByName looks up a registered function by name.
func (r *Registry) GetFuncByName(name string) ({handler_type}, error) {{
	fn, ok := r.funcs[name]
	if !ok {{
		return nil, fmt.Errorf("%w: %s", ErrFuncNotFound, name)
	}}
	return fn, nil
}}
"""

SCANNED_IMPORT_TEMPLATE = '\n\t{alias} "{import_path}"'

ENTRY_TEMPLATE = '\t\t\t"{name}": {alias}.{name},\n'

# Ключевые слова, предобъявленные идентификаторы и имена из шаблона:
# алиас пакета не должен с ними совпадать
RESERVED_IDENTIFIERS = frozenset(
    {
        "break", "case", "chan", "const", "continue", "default", "defer",
        "else", "fallthrough", "for", "func", "go", "goto", "if", "import",
        "interface", "map", "package", "range", "return", "select", "struct",
        "switch", "type", "var",
        "any", "bool", "byte", "comparable", "complex64", "complex128",
        "error", "float32", "float64", "int", "int8", "int16", "int32",
        "int64", "rune", "string", "uint", "uint8", "uint16", "uint32",
        "uint64", "uintptr", "true", "false", "iota", "nil",
        "append", "cap", "clear", "close", "complex", "copy", "delete",
        "imag", "len", "make", "max", "min", "new", "panic", "print",
        "println", "real", "recover",
        "errors", "fmt", "flow",
        "Registry", "NewRegistry", "ErrFuncNotFound",
    }
)
