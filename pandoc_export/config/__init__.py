from .loader import load_config, save_config
from .models import AppConfig, ExportSettings

__all__ = [
    "AppConfig",
    "ExportSettings",
    "load_config",
    "save_config",
]
