import importlib
import os
from pathlib import Path

# Settings copied onto the Flask app config
SETTING_NAMES = (
    "SECRET_KEY", "DEBUG", "TESTING", "DATA_DIR", "PUBLIC_DIR", "MAX_CONTENT_LENGTH",
    "CORS_ORIGINS", "LOG_LEVEL", "HOST", "PORT",
)

# Relative paths in these settings are taken from the working directory
PATH_SETTINGS = ("DATA_DIR", "PUBLIC_DIR")


def get_settings_module() -> str:
    # Read the environment from APP_ENV, default is 'development'
    env = os.getenv("APP_ENV", "development").lower()

    # 1. Production
    if env in {"prod", "production"}:
        return "config.production"

    # 2. Testing
    if env in {"test", "testing"}:
        return "config.testing"

    # 3. Everything else runs as development
    return "config.development"


def load_settings(**overrides) -> dict:
    """Settings for the selected environment, with `overrides` applied on top.

    DATA_DIR and PUBLIC_DIR come back as absolute paths, so the app and the
    scripts agree on where the CSV files live regardless of install location.
    """

    module = importlib.import_module(get_settings_module())
    settings = {name: getattr(module, name) for name in SETTING_NAMES if hasattr(module, name)}
    settings.update({k.upper(): v for k, v in overrides.items()})

    for name in PATH_SETTINGS:
        if settings.get(name):
            path = Path(settings[name]).expanduser()
            if not path.is_absolute():
                path = Path.cwd() / path
            settings[name] = str(path.resolve())

    settings["SETTINGS_MODULE"] = module.__name__
    return settings
