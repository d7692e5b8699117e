"""Общие константы."""

# Расширение исходников Go
SOURCE_SUFFIX = ".go"

# Манифест модуля и ключевое слово строки с базовым путём
MANIFEST_NAME = "go.mod"
MODULE_KEYWORD = "module"

# Ожидаемая сигнатура: func Name(*flow.ProcessContext, []flow.DefinedInput)
CONTEXT_TYPE = "*flow.ProcessContext"
INPUT_TYPE = "[]flow.DefinedInput"

# Runtime-пакет, на который ссылается сгенерированный код
RUNTIME_IMPORT = "github.com/e4coder/flow"
RUNTIME_ALIAS = "flow"
HANDLER_TYPE = "flow.ProcessHandler"

# Параметры вывода по умолчанию
DEFAULT_CONFIG_FILE = "flowconfig.json"
DEFAULT_OUT_FILE = "out.go"
DEFAULT_OUT_PACKAGE = "output"
