from typing import Any, Callable

import orjson
import structlog
from structlog.types import EventDict, Processor, WrappedLogger
from structlog.typing import ProcessorReturnValue

from vending.utils.metaclasses import Singleton
from vending.utils.registry import BaseFactory, register_in

from .enums import RendererNames
from .interfaces import ILogProcessor


class RendererFactory(BaseFactory[ILogProcessor], metaclass=Singleton):
    pass


class RendererBuilder:
    def __init__(self, factory: RendererFactory) -> None:
        self.factory = factory

    def build_renderer(self, debug: bool) -> ILogProcessor:
        if not debug:
            return self.factory.create(RendererNames.JSON)
        return self.factory.create(
            RendererNames.CONSOLE, colors=False, pad_event_to=24
        )


@register_in(RendererFactory, RendererNames.JSON)
class JsonRenderStrategy:
    def __init__(self) -> None:
        self.renderer: Processor = structlog.processors.JSONRenderer(
            serializer=self._serializer
        )

    def __call__(
        self, logger: WrappedLogger, method_name: str, event_dict: EventDict
    ) -> ProcessorReturnValue:
        return self.renderer(logger, method_name, event_dict)

    def _serializer(
        self,
        data: Any,
        default: Callable[[Any], Any] | None = None,
        option: int | None = None,
    ) -> str:
        return orjson.dumps(data, default=default, option=option).decode(
            "utf-8"
        )


@register_in(RendererFactory, RendererNames.CONSOLE)
class ConsoleRenderStrategy:
    def __init__(self, colors: bool = False, pad_event_to: int = 24) -> None:
        self.renderer: Processor = structlog.dev.ConsoleRenderer(
            colors=colors,
            pad_event_to=pad_event_to,
        )

    def __call__(
        self, logger: WrappedLogger, method_name: str, event_dict: EventDict
    ) -> ProcessorReturnValue:
        event_dict.pop("app", None)
        return self.renderer(logger, method_name, event_dict)
