"""Reading sphere positions from whitespace-separated text files."""

from __future__ import annotations

import logging
import math
import struct
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

log = logging.getLogger(__name__)

HEADER_LINES = 3
"""Number of leading lines that are always ignored."""


class DataFileError(Exception):
    """Raised when a data file cannot be read or holds no positions."""


@dataclass(frozen=True)
class Point:
    """A position in 3D space."""

    x: float
    y: float
    z: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z


def _to_float(text: str) -> float | None:
    """Parse a single-precision number, or return None if it is not one."""
    if "_" in text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if math.isnan(value) or math.isinf(value):
        return value
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return None


def parse_lines(lines: Iterable[str]) -> list[Point]:
    """Extract points from text lines, skipping the header and bad lines.

    The first three lines are a header. Every following non-empty line
    must start with three numbers separated by spaces; anything after
    them is ignored. Lines that do not fit are logged and skipped.
    """
    points: list[Point] = []
    for number, raw in enumerate(lines, start=1):
        line = raw.strip()
        if number <= HEADER_LINES or not line:
            continue
        parts = [part for part in line.split(" ") if part]
        if len(parts) < 3:
            log.warning("Skipping malformed line (less than 3 parts): %r", line)
            continue
        coords = [_to_float(part) for part in parts[:3]]
        if any(value is None for value in coords):
            log.warning(
                "Skipping malformed line (not 3 valid floats at start): %r", line
            )
            continue
        points.append(Point(*coords))
    return points


def parse_data_file(path: str | Path) -> list[Point]:
    """Read the points of a data file.

    Raises DataFileError if the file cannot be opened or yields no point.
    """
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            points = parse_lines(handle)
    except OSError as exc:
        log.warning("Cannot open file: %s %s", path, exc)
        raise DataFileError(f"cannot open {path}: {exc}") from exc
    log.debug("Loaded %d sphere positions.", len(points))
    if not points:
        raise DataFileError(f"no sphere positions in {path}")
    return points