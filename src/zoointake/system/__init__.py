"""System domain package.

This package contains process-level support components:
- PathResolver: Resolution of the fixed records file names
- StructlogConfigurator: Structured logging configuration
"""

from zoointake.system import structlog_configurator
from zoointake.system.path_resolver import PathResolver

__all__ = [
    "PathResolver",
    "structlog_configurator",
]
