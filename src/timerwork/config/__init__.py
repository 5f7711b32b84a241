import os


def get_settings_module() -> str:
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "timerwork.config.production"

    if env in {"test", "testing"}:
        return "timerwork.config.testing"

    return "timerwork.config.development"
