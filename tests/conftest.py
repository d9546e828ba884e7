"""Test configuration and fixtures."""

import os

# Tokens cannot be issued or verified without a signing secret
os.environ.setdefault("AUTH__SECRET", "test-secret")
os.environ.setdefault("ENVIRONMENT", "test")
