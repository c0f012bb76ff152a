# product_catalogue/config/__init__.py
# Exposes the configuration dataclass and its singleton.

from .settings import config, Config, load_config

__all__ = ["config", "Config", "load_config"]
