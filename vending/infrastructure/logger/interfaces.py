from abc import ABC, abstractmethod
from logging import Handler
from pathlib import Path
from typing import Any, Protocol

from structlog.types import EventDict, Processor, WrappedLogger
from structlog.typing import ProcessorReturnValue


class ILoggingConfig(Protocol):
    debug: bool
    app_name: str
    log_level: str
    console_stream: str
    enable_file_logging: bool
    logs_dir: Path
    logs_file_name: str
    max_file_size_mb: int
    backup_count: int


class IHandler(Protocol):
    def __call__(self, *args: Any, **kwargs: Any) -> Handler: ...


class ILogProcessor(Protocol):
    def __call__(self, *args: Any, **kwargs: Any) -> ProcessorReturnValue: ...


class BaseProcessorStrategy(ABC):
    @abstractmethod
    def __init__(self, **kwargs) -> None:
        self.processor: Processor

    def __call__(
        self, logger: WrappedLogger, method_name: str, event_dict: EventDict
    ) -> ProcessorReturnValue:
        return self.processor(logger, method_name, event_dict)
