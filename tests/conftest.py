# tests/conftest.py
# Cross-app tests share the domain fixtures.
from staffing_core.conftest import *  # noqa: F401,F403
