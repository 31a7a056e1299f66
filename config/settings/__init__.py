# config/settings/__init__.py
# DJANGO_ENV picks the settings module; pytest points DJANGO_SETTINGS_MODULE at config.settings.test directly.
import os

DJANGO_ENV = os.getenv("DJANGO_ENV", "local").lower()

if DJANGO_ENV == "prod":
    from .prod import *  # noqa
elif DJANGO_ENV == "test":
    from .test import *  # noqa
else:
    from .local import *  # noqa
