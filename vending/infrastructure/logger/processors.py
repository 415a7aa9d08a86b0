from typing import Any

import structlog
from structlog.types import EventDict, Processor

from vending.utils.metaclasses import Singleton
from vending.utils.registry import BaseFactory, register_in

from .enums import ProcessorNames
from .interfaces import BaseProcessorStrategy, ILoggingConfig, ILogProcessor


class ProcessorFactory(BaseFactory[ILogProcessor], metaclass=Singleton):
    pass


class ProcessorBuilder:
    def __init__(
        self,
        factory: ProcessorFactory,
        additional_processors: list[ILogProcessor] | None = None,
    ) -> None:
        self.factory = factory
        self.additional_processors = additional_processors or []

    def build_base_chain(self) -> list[ILogProcessor]:
        return [
            self.factory.create(ProcessorNames.MERGE_CONTEXTVARS),
            self.factory.create(ProcessorNames.ADD_LOGGER_NAME),
            self.factory.create(ProcessorNames.ADD_LOG_LEVEL),
            self.factory.create(ProcessorNames.TIMESTAMP),
            self.factory.create(ProcessorNames.EXC_INFO),
        ]

    def build_shared_chain(
        self, logging_config: ILoggingConfig
    ) -> list[ILogProcessor]:
        chain = self.build_base_chain()
        chain.append(
            self.factory.create(
                ProcessorNames.CONTEXT_ADDER,
                logging_config=logging_config,
            )
        )
        chain.append(self.factory.create(ProcessorNames.MESSAGE_CLEANER))
        chain.extend(self.additional_processors)
        return chain

    def build_formatter_wrapper(self) -> ILogProcessor:
        return self.factory.create(ProcessorNames.FORMATTER_WRAPPER)


class LogMessageCleaner:
    def __call__(
        self, logger: Any, method_name: str, event_dict: EventDict
    ) -> EventDict:
        """Strip surrounding whitespace from the event message."""
        event = event_dict.get("event")
        if isinstance(event, str):
            event_dict["event"] = event.strip()
        return event_dict


class AppContextAdder:
    def __init__(self, app_name: str) -> None:
        self.app_name = app_name

    def __call__(
        self, logger: Any, method_name: str, event_dict: EventDict
    ) -> EventDict:
        """
        Tag every entry with the application name.

        Only the JSON renderer shows it; the console renderer drops it to
        keep interactive output short.
        """
        event_dict.setdefault("app", self.app_name)
        return event_dict


@register_in(ProcessorFactory, ProcessorNames.MERGE_CONTEXTVARS)
class MergeContextvarsStrategy(BaseProcessorStrategy):
    def __init__(self) -> None:
        self.processor: Processor = structlog.contextvars.merge_contextvars


@register_in(ProcessorFactory, ProcessorNames.ADD_LOGGER_NAME)
class AddLoggerNameStrategy(BaseProcessorStrategy):
    def __init__(self) -> None:
        self.processor: Processor = structlog.stdlib.add_logger_name


@register_in(ProcessorFactory, ProcessorNames.ADD_LOG_LEVEL)
class AddLogLevelStrategy(BaseProcessorStrategy):
    def __init__(self) -> None:
        self.processor: Processor = structlog.stdlib.add_log_level


@register_in(ProcessorFactory, ProcessorNames.TIMESTAMP)
class TimestampStamperStrategy(BaseProcessorStrategy):
    def __init__(self, fmt: str | None = "%H:%M:%S") -> None:
        self.processor: Processor = structlog.processors.TimeStamper(fmt=fmt)


@register_in(ProcessorFactory, ProcessorNames.EXC_INFO)
class ExcInfoFormatterStrategy(BaseProcessorStrategy):
    def __init__(self) -> None:
        self.processor: Processor = structlog.processors.format_exc_info


@register_in(ProcessorFactory, ProcessorNames.CONTEXT_ADDER)
class AppContextAdderStrategy(BaseProcessorStrategy):
    def __init__(self, logging_config: ILoggingConfig) -> None:
        self.processor: Processor = AppContextAdder(
            app_name=logging_config.app_name
        )


@register_in(ProcessorFactory, ProcessorNames.MESSAGE_CLEANER)
class LogMessageCleanerStrategy(BaseProcessorStrategy):
    def __init__(self) -> None:
        self.processor: Processor = LogMessageCleaner()


@register_in(ProcessorFactory, ProcessorNames.FORMATTER_WRAPPER)
class FormatterWrapperStrategy(BaseProcessorStrategy):
    def __init__(self) -> None:
        self.processor: Processor = (
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter
        )
