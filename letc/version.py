"""Runtime engine version exposed as ``letc.__version__``."""

from .main import letc

__version__ = letc.ENGINE_VERSION

__all__ = ["__version__"]
