"""Root conftest - shared test configuration."""

import os

# Human-readable logs in test output; never pick up a developer's .env locales
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("DEFAULT_LOCALE", "en-CA")
