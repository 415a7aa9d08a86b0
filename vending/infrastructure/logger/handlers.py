import sys
from logging import Handler, StreamHandler
from logging.handlers import RotatingFileHandler

from vending.utils.metaclasses import Singleton
from vending.utils.registry import BaseFactory, register_in

from .enums import ConsoleStream, HandlerNames
from .interfaces import IHandler, ILoggingConfig


class HandlerFactory(BaseFactory[IHandler], metaclass=Singleton):
    pass


class HandlerBuilder:
    def __init__(self, factory: HandlerFactory) -> None:
        self.factory = factory

    def build_console_handler(
        self, stream: ConsoleStream = ConsoleStream.STDERR
    ) -> Handler:
        strategy = self.factory.create(HandlerNames.CONSOLE, stream=stream)
        return strategy()

    def build_file_handler(self, logging_config: ILoggingConfig) -> Handler:
        logging_config.logs_dir.mkdir(parents=True, exist_ok=True)
        strategy = self.factory.create(
            HandlerNames.FILE, logging_config=logging_config
        )
        return strategy()

    def build_handler_chain(
        self,
        logging_config: ILoggingConfig,
    ) -> list[Handler]:
        result = [
            self.build_console_handler(
                ConsoleStream(logging_config.console_stream)
            )
        ]
        if logging_config.enable_file_logging:
            result.append(self.build_file_handler(logging_config))
        return result


@register_in(HandlerFactory, HandlerNames.CONSOLE)
class ConsoleHandlerStrategy:
    def __init__(self, stream: ConsoleStream = ConsoleStream.STDERR) -> None:
        self.stream = stream

    def __call__(self) -> Handler:
        if self.stream == ConsoleStream.STDOUT:
            return StreamHandler(sys.stdout)
        return StreamHandler(sys.stderr)


@register_in(HandlerFactory, HandlerNames.FILE)
class FileHandlerStrategy:
    def __init__(self, logging_config: ILoggingConfig) -> None:
        self.logging_config = logging_config

    def __call__(self) -> Handler:
        return RotatingFileHandler(
            filename=str(
                self.logging_config.logs_dir
                / self.logging_config.logs_file_name
            ),
            maxBytes=self.logging_config.max_file_size_mb * 1024 * 1024,
            backupCount=self.logging_config.backup_count,
            encoding="utf-8",
        )
