from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Union

import pandas as pd
import requests

from pubquality.config import http_timeout
from pubquality.constants import CSV_HEADER

logger = logging.getLogger(__name__)

Source = Union[str, Path]


class SourceUnavailable(Exception):
    """The publications source could not be fetched or decoded."""

    def __init__(self, source: Source, reason: str = "") -> None:
        self.source = str(source)
        self.reason = reason
        msg = f"source unavailable: {self.source}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)


class MalformedRow(ValueError):
    """A data row with no usable quality field."""


@dataclass(frozen=True)
class Record:
    link: str
    quality: str


def is_url(source: Source) -> bool:
    s = str(source).strip().lower()
    return s.startswith("http://") or s.startswith("https://")


def read_source(source: Source, timeout: Optional[float] = None) -> str:
    if is_url(source):
        try:
            resp = requests.get(str(source).strip(), timeout=timeout or http_timeout())
            resp.raise_for_status()
            return resp.content.decode("utf-8")
        except (requests.RequestException, UnicodeDecodeError) as e:
            raise SourceUnavailable(source, str(e)) from e
    path = Path(source)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnavailable(source, str(e)) from e


def parse_row(row: str) -> Record:
    # The link ends at the first comma and the quality at the next one, so
    # links containing commas are not supported.
    link, sep, rest = row.partition(",")
    if not sep:
        raise MalformedRow(f"no quality field: {row!r}")
    quality_raw = rest.split(",", 1)[0]
    quality = quality_raw.strip()
    if not quality:
        raise MalformedRow(f"empty quality: {row!r}")
    return Record(link=link, quality=quality)


def parse_records(text: str) -> List[Record]:
    """Parse ``link,quality`` rows. The first line is always the header."""
    rows = text.split("\n")[1:]
    out: List[Record] = []
    dropped = 0
    for row in rows:
        try:
            out.append(parse_row(row))
        except MalformedRow as e:
            dropped += 1
            logger.debug("Dropping row: %s", e)
    logger.info("Parsed %d records (%d rows dropped)", len(out), dropped)
    return out


def load_records(source: Source) -> List[Record]:
    return parse_records(read_source(source))


def load_records_or_empty(source: Source) -> List[Record]:
    try:
        return load_records(source)
    except SourceUnavailable as e:
        logger.warning("Could not load publications, showing an empty dashboard: %s", e)
        return []


def records_to_csv(records: Iterable[Record]) -> bytes:
    df = pd.DataFrame(
        [{"link": r.link, "quality": r.quality} for r in records],
        columns=CSV_HEADER.split(","),
    )
    return df.to_csv(index=False, lineterminator="\n").encode("utf-8")
