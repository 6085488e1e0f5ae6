"""Test configuration."""

import os

# Settings are read from the environment; tests never talk to real services
os.environ.setdefault("ENVIRONMENT", "test")
