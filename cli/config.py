"""Configuration and storage utilities for CLI client."""

import os
from pathlib import Path

# Configuration
API_URL = os.getenv("EMPNOTES_API_URL", "http://localhost:8000")
REQUEST_TIMEOUT = 10.0
TOKEN_FILE = Path.home() / ".empnotes" / "token"


def save_token(token: str):
    """Save the backend access token to a local file."""
    TOKEN_FILE.parent.mkdir(parents=True, exist_ok=True)
    TOKEN_FILE.write_text(token)


def load_token() -> str | None:
    """Load the backend access token from a local file."""
    if TOKEN_FILE.exists():
        return TOKEN_FILE.read_text().strip() or None
    return None


def delete_token():
    """Delete the token file."""
    if TOKEN_FILE.exists():
        TOKEN_FILE.unlink()
