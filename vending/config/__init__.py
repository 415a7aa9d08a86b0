from .config import AppConfig, LoggingConfig, MachineConfig, get_config

__all__ = [
    "AppConfig",
    "LoggingConfig",
    "MachineConfig",
    "get_config",
]
