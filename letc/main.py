"""Compatibility module re-exporting the engine.

The implementation lives in `engine.py`; this keeps the short
``from letc.main import letc`` import path stable.
"""

from .engine import Mode, cli, letc, main

__all__ = ["Mode", "cli", "letc", "main"]
