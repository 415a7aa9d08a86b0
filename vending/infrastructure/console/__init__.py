from .shell import VendingShell

__all__ = ["VendingShell"]
