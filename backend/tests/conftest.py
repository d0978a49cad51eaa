"""Root conftest — shared test configuration."""

import os

# Tests never read a developer's .env overrides for these
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("MAX_SESSIONS", "1000")
