"""Domain policies package."""

from .decimal_policy import DecimalPolicy

__all__ = ["DecimalPolicy"]
