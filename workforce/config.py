"""
workforce/config.py
Settings lookup for the workforce dashboard.
All configuration access goes through this module.
"""

import logging
import os

import streamlit as st
from dotenv import load_dotenv

load_dotenv()

_DEFAULTS = {
    "API_BASE_URL":        "http://localhost:8080",
    "API_TIMEOUT":         "15",
    "SESSION_DIR":         os.path.join("~", ".workforce", "sessions"),
    "SESSION_COOKIE_DAYS": "30",
    "LOG_LEVEL":           "INFO",
}


# ─── Private helpers ─────────────────────────────────────────────────────────

def _get_secret(key: str) -> str | None:
    """
    Resolve a secret by name.

    Tries st.secrets first (Streamlit Cloud), then falls back to os.environ
    (local development via .env loaded above).  Returns None if the key is
    absent in both sources.
    """
    try:
        return st.secrets[key]
    except Exception:
        return os.environ.get(key)


# ─── Public accessors ────────────────────────────────────────────────────────

def get_setting(key: str) -> str:
    """Return a setting, falling back to the built-in default."""
    value = _get_secret(key)
    if value in (None, ""):
        return _DEFAULTS[key]
    return str(value)


def api_base_url() -> str:
    return get_setting("API_BASE_URL").rstrip("/")


def api_timeout() -> float:
    """
    Request timeout in seconds.

    An unparseable value falls back to the default rather than leaving
    requests without any timeout.
    """
    raw = get_setting("API_TIMEOUT")
    try:
        return float(raw)
    except ValueError:
        return float(_DEFAULTS["API_TIMEOUT"])


def session_dir() -> str:
    """Directory holding one session file per browser."""
    return os.path.expanduser(get_setting("SESSION_DIR"))


def session_cookie_days() -> int:
    raw = get_setting("SESSION_COOKIE_DAYS")
    try:
        return max(1, int(raw))
    except ValueError:
        return int(_DEFAULTS["SESSION_COOKIE_DAYS"])


def configure_logging() -> None:
    """
    Configure root logging once per process.

    logging.basicConfig is a no-op when handlers already exist, so every page
    may call this at the top without duplicating output across reruns.
    """
    level = getattr(logging, get_setting("LOG_LEVEL").upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
