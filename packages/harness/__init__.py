from .shell import HelperShell

__all__ = ["HelperShell"]
