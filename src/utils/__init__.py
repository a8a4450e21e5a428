"""Shared utilities."""

from .decimal_utils import coerce_decimal
from .utils import get_project_root

__all__ = ["coerce_decimal", "get_project_root"]
