"""Runtime settings for the dashboard.

Every value is read from the environment first, then from
``.streamlit/secrets.toml``, then falls back to the defaults below.
"""
from __future__ import annotations

import logging
import math
import os
from pathlib import Path
from typing import Optional

DATA_DIR = Path(__file__).resolve().parents[1] / "data"
DEFAULT_SOURCE = DATA_DIR / "Deysa.csv"
DEFAULT_HTTP_TIMEOUT = 10.0
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

SOURCE_ENV = "PUBQUALITY_SOURCE"
HTTP_TIMEOUT_ENV = "PUBQUALITY_HTTP_TIMEOUT"
LOG_LEVEL_ENV = "PUBQUALITY_LOG_LEVEL"


def _setting(name: str) -> Optional[str]:
    value = os.getenv(name)
    if not value:
        try:
            import streamlit as st

            value = st.secrets.get(name)
        except Exception:
            value = None
    value = str(value or "").strip()
    return value or None


def data_source() -> str:
    """Path or http(s) URL of the publications CSV."""
    return _setting(SOURCE_ENV) or str(DEFAULT_SOURCE)


def http_timeout() -> float:
    raw = _setting(HTTP_TIMEOUT_ENV)
    if not raw:
        return DEFAULT_HTTP_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        return DEFAULT_HTTP_TIMEOUT
    if not math.isfinite(value):
        return DEFAULT_HTTP_TIMEOUT
    return max(value, 0.1)


def log_level() -> int:
    name = (_setting(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def configure_logging() -> None:
    # basicConfig is a no-op once the root logger has handlers, so Streamlit
    # reruns do not stack duplicate handlers.
    logging.basicConfig(level=log_level(), format=LOG_FORMAT)
