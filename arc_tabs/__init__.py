"""List open Arc tabs via osascript."""

from .models import RunOptions, TabRecord

__all__ = ["RunOptions", "TabRecord"]

__version__ = "0.1.0"
