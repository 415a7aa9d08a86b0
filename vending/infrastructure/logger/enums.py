from enum import StrEnum


class ProcessorNames(StrEnum):
    MERGE_CONTEXTVARS = "merge_contextvars"
    ADD_LOGGER_NAME = "add_logger_name"
    ADD_LOG_LEVEL = "add_log_level"
    TIMESTAMP = "timestamp_stamper"
    EXC_INFO = "exc_info_formatter"

    CONTEXT_ADDER = "context_adder"
    MESSAGE_CLEANER = "message_cleaner"

    FORMATTER_WRAPPER = "formatter_wrapper"


class HandlerNames(StrEnum):
    FILE = "file"
    CONSOLE = "console"


class RendererNames(StrEnum):
    JSON = "json"
    CONSOLE = "console"


class ConsoleStream(StrEnum):
    """Where console log lines go. stdout is reserved for the shell."""

    STDERR = "stderr"
    STDOUT = "stdout"
