"""Core functionality."""

from .upgradeable import UpgradeablePrinter

__all__ = ["UpgradeablePrinter"]
