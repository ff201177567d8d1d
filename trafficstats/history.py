"""The daily traffic history file: one line per day, newest first."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from datetime import date
from os import PathLike
from pathlib import Path
from typing import Iterable

MAX_DAYS = 10000
"""Most days read from a history file."""

_U64 = 1 << 64
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    """Leading integer of ``text``; junk after it is ignored and no digits give 0."""
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _kbytes(text: str) -> int:
    """Leading integer of ``text`` as an unsigned 64-bit count."""
    return _atoi(text) % _U64


@dataclass
class HistoryTraffic:
    """Traffic of one day in kilobytes.

    ``mixed`` marks a record that only holds a total, kept in ``down_kbytes``.
    """

    year: int
    month: int
    day: int
    up_kbytes: int = 0
    down_kbytes: int = 0
    mixed: bool = False

    @property
    def kbytes(self) -> int:
        return self.up_kbytes + self.down_kbytes

    @property
    def date_key(self) -> tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def same_date(self, other: "HistoryTraffic") -> bool:
        return self.date_key == other.date_key

    def to_line(self) -> str:
        stamp = f"{self.year:04d}/{self.month:02d}/{self.day:02d}"
        if self.mixed:
            return f"{stamp} {self.down_kbytes}"
        return f"{stamp} {self.up_kbytes}/{self.down_kbytes}"


def parse_line(line: str) -> HistoryTraffic | None:
    """Parse one ``YYYY/MM/DD up/down`` or ``YYYY/MM/DD total`` line.

    Returns None for lines that are too short, hold an impossible date
    or record no traffic at all.
    """
    if len(line) < 12:
        return None
    year = _atoi(line[0:4])
    if not 1900 <= year <= 3000:
        return None
    month = _atoi(line[5:7])
    if not 1 <= month <= 12:
        return None
    day = _atoi(line[8:10])
    if not 1 <= day <= 31:
        return None

    slash = line.find("/", 11)
    if slash < 0:
        traffic = HistoryTraffic(year, month, day, 0, _kbytes(line[11:]), mixed=True)
    else:
        traffic = HistoryTraffic(
            year, month, day, _kbytes(line[11:slash]), _kbytes(line[slash + 1:])
        )
    return traffic if traffic.kbytes > 0 else None


class HistoryTrafficFile:
    """History records kept sorted newest first, with today's record at the front."""

    def __init__(self, path: str | PathLike[str]):
        self.path = Path(path)
        self.traffics: list[HistoryTraffic] = []
        self.today_up_traffic = 0
        self.today_down_traffic = 0
        self.size = 0

    def __len__(self) -> int:
        return len(self.traffics)

    def save(self) -> None:
        """Write a ``lines: "N"`` header followed by one line per day."""
        lines = [f'lines: "{len(self.traffics)}"']
        lines.extend(traffic.to_line() for traffic in self.traffics)
        self.path.write_text("\n".join(lines) + "\n", encoding="ascii")

    def _read_lines(self) -> list[str] | None:
        try:
            text = self.path.read_text(encoding="utf-8", errors="replace")
        except OSError:
            return None
        return text.splitlines()

    def load(self, today: date | None = None) -> None:
        """Add the records of the file, then sort and merge them."""
        lines = self._read_lines()
        if lines is not None:
            for line in lines:
                if len(self.traffics) >= MAX_DAYS:
                    break
                traffic = parse_line(line)
                if traffic is not None:
                    self.traffics.append(traffic)
        self._normalize(today)

    def load_size(self) -> None:
        """Read only the record count stored in the header line."""
        lines = self._read_lines()
        if not lines:
            return
        first = lines[0]
        marker = first.find("lines:")
        if marker < 0:
            return
        open_quote = first.find('"', marker + 6)
        if open_quote < 0:
            self.size = 0
            return
        close_quote = first.find('"', open_quote + 1)
        value = first[open_quote + 1:] if close_quote < 0 else first[open_quote + 1:close_quote]
        self.size = _kbytes(value)

    def merge(
        self,
        other: "HistoryTrafficFile",
        ignore_same_data: bool = False,
        today: date | None = None,
    ) -> None:
        """Add the records of ``other``.

        Days already present are skipped when ``ignore_same_data`` is set;
        otherwise their traffic is added together.
        """
        known = {traffic.date_key for traffic in self.traffics}
        for traffic in other.traffics:
            if ignore_same_data and traffic.date_key in known:
                continue
            self.traffics.append(replace(traffic))
        self._normalize(today)

    def _normalize(self, today: date | None) -> None:
        today = today or date.today()
        current = HistoryTraffic(today.year, today.month, today.day)

        if not self.traffics:
            self.traffics.insert(0, current)

        if len(self.traffics) >= 2:
            self.traffics.sort(key=lambda t: t.date_key, reverse=True)
            # Neighbours of equal date are folded pairwise in one pass.
            i = 0
            while i < len(self.traffics) - 1:
                head, following = self.traffics[i], self.traffics[i + 1]
                if head.same_date(following):
                    head.up_kbytes += following.up_kbytes
                    head.down_kbytes += following.down_kbytes
                    del self.traffics[i + 1]
                i += 1

        first = self.traffics[0]
        if first.same_date(current):
            self.today_up_traffic = first.up_kbytes * 1024
            self.today_down_traffic = first.down_kbytes * 1024
            first.mixed = False
        else:
            self.traffics.insert(0, current)
        self.size = len(self.traffics)

    def __iter__(self) -> Iterable[HistoryTraffic]:
        return iter(self.traffics)