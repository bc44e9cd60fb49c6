from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Tuple

import streamlit as st

from pubquality.storage import Record, Source, SourceUnavailable, is_url, load_records

logger = logging.getLogger(__name__)

_EXPANDED_KEY = "_expanded_quality"
_LOAD_ERROR_KEY = "_load_error"


def toggle_expanded(current: Optional[str], label: str) -> Optional[str]:
    """Single-select toggle: clicking the open section closes it."""
    return None if current == label else label


def get_expanded() -> Optional[str]:
    value = st.session_state.get(_EXPANDED_KEY)
    return str(value) if value else None


def on_toggle(label: str) -> None:
    st.session_state[_EXPANDED_KEY] = toggle_expanded(get_expanded(), label)


def source_signature(source: Source) -> Tuple[bool, int, int]:
    """Cache key part that changes when a local source file changes."""
    if is_url(source):
        return (True, 0, 0)
    try:
        stat = Path(source).stat()
    except OSError:
        return (False, 0, 0)
    return (True, int(stat.st_size), int(stat.st_mtime_ns))


@st.cache_data(show_spinner=False)
def _cached_load(source: str, sig: Tuple[bool, int, int]) -> List[Record]:
    return load_records(source)


def load_records_cached(source: Source) -> List[Record]:
    """Load once per source version; an unavailable source yields no records."""
    try:
        records = _cached_load(str(source), source_signature(source))
    except SourceUnavailable as e:
        logger.warning("Could not load publications, showing an empty dashboard: %s", e)
        st.session_state[_LOAD_ERROR_KEY] = str(e)
        return []
    st.session_state.pop(_LOAD_ERROR_KEY, None)
    return records


def last_load_error() -> Optional[str]:
    value = st.session_state.get(_LOAD_ERROR_KEY)
    return str(value) if value else None
