"""Root conftest — shared test configuration."""

import os

# Keep test output readable and independent of the host's deployment env
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("APP_VERSION", "v-test")
