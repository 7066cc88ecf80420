"""Root conftest: shared test configuration."""

import os

# Module-level app in catalog.main reads settings at import time
os.environ.setdefault("AUTH_TOKEN", "test-token")
os.environ.setdefault("SEED_CATALOG", "false")
