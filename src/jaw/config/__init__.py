from .loader import ConfigError, load_config, parse_config
from .models import LoggingConfig, ReaderConfig, SourceConfig

# Config exports are intentionally small.
__all__ = ["ConfigError", "LoggingConfig", "ReaderConfig", "SourceConfig", "load_config", "parse_config"]
