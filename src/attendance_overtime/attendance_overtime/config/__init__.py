import os

_PACKAGE = __name__


def get_settings_module() -> str:
    # APP_ENV selects the settings module, defaulting to development
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return f"{_PACKAGE}.production"

    if env in {"test", "testing"}:
        return f"{_PACKAGE}.testing"

    return f"{_PACKAGE}.development"
