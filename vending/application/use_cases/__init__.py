from .machine import build_machine
from .session import run_shopping_session

__all__ = [
    "build_machine",
    "run_shopping_session",
]
