"""Root conftest: shared test configuration."""

import os

# Ensure tests don't pick up a developer's local environment
os.environ.setdefault("VALIDIZE_TRACE", "false")
os.environ.setdefault("VALIDIZE_LOG_LEVEL", "WARNING")
os.environ.setdefault("VALIDIZE_LOG_FORMAT", "text")
