"""Zoo intake configuration package.

Settings come from an optional ``zoo.yaml`` in the working directory and cover
logging only; file names are fixed.
"""

from .manager import ConfigManager
from .models import LoggingConfig, ZooConfig

__all__ = [
    "ConfigManager",
    "LoggingConfig",
    "ZooConfig",
]
