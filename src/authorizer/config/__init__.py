from .loader import ConfigError, load_baseline_config, load_config, parse_config

# Config exports are intentionally small.
__all__ = ["ConfigError", "load_baseline_config", "load_config", "parse_config"]
