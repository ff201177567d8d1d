"""Table rows and bar geometry for the traffic history list."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from enum import Enum, IntEnum
from typing import Iterable, Sequence

from trafficstats.history import HistoryTraffic

MAX_RANGE = 1000
"""Bar value of the row with the most traffic."""

_KB_PER_GB = 1024 * 1024

_WEEKDAY_NAMES = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

_COLUMN_COUNT = 5
_DATE_COLUMN_MAX = 150
_TRAFFIC_COLUMN_MAX = 120
_SCROLLBAR_RESERVE = 20


class ViewType(IntEnum):
    """How history days are grouped into rows; values match the view selector."""

    DAY = 0
    MONTH = 1
    QUARTER = 2
    YEAR = 3


class TrafficColor(Enum):
    """Bar colour, chosen by how much traffic a row holds."""

    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    DARK_RED = "dark_red"


@dataclass
class ListRow:
    """One row of the history table."""

    label: str
    up_kbytes: int = 0
    down_kbytes: int = 0
    mixed: bool = False

    @property
    def total_kbytes(self) -> int:
        return self.up_kbytes + self.down_kbytes

    @property
    def up_text_shown(self) -> bool:
        """Whether upload and download are shown apart rather than as '-'."""
        return not self.mixed


def weekday(year: int, month: int, day: int) -> int:
    """Day of the week, 0 for Sunday through 6 for Saturday."""
    return (date(year, month, day).weekday() + 1) % 7


def period_label(traffic: HistoryTraffic, view_type: ViewType) -> str:
    """Text of the date column for ``traffic`` in the given view."""
    view_type = ViewType(view_type)
    if view_type is ViewType.DAY:
        name = _WEEKDAY_NAMES[weekday(traffic.year, traffic.month, traffic.day)]
        return f"{traffic.year:04d}/{traffic.month:02d}/{traffic.day:02d} ({name})"
    if view_type is ViewType.MONTH:
        return f"{traffic.year:04d}/{traffic.month:02d}"
    if view_type is ViewType.QUARTER:
        quarter = (min(max(traffic.month, 1), 12) - 1) // 3 + 1
        return f"{traffic.year:04d}/Q{quarter}"
    return f"{traffic.year:04d}"


def build_rows(traffics: Iterable[HistoryTraffic], view_type: ViewType) -> list[ListRow]:
    """Rows of the table; outside the day view, neighbouring days of one period are summed."""
    view_type = ViewType(view_type)
    rows: list[ListRow] = []
    for traffic in traffics:
        label = period_label(traffic, view_type)
        if view_type is ViewType.DAY:
            rows.append(ListRow(label, traffic.up_kbytes, traffic.down_kbytes, traffic.mixed))
        elif rows and rows[-1].label == label:
            rows[-1].up_kbytes += traffic.up_kbytes
            rows[-1].down_kbytes += traffic.down_kbytes
        else:
            rows.append(ListRow(label, traffic.up_kbytes, traffic.down_kbytes))
    return rows


def max_row_traffic(rows: Sequence[ListRow], view_type: ViewType) -> int:
    """The traffic the bars are scaled to.

    In the day view it is the largest row; in grouped views the last
    (oldest) row is not taken into account.
    """
    considered = rows if ViewType(view_type) is ViewType.DAY else rows[:-1]
    return max((row.total_kbytes for row in considered), default=0)


def traffic_color(total_kbytes: int) -> TrafficColor:
    """Colour for a total: below 1 GB blue, 10 GB green, 100 GB yellow, 1 TB red."""
    if total_kbytes < _KB_PER_GB:
        return TrafficColor.BLUE
    if total_kbytes < 10 * _KB_PER_GB:
        return TrafficColor.GREEN
    if total_kbytes < 100 * _KB_PER_GB:
        return TrafficColor.YELLOW
    if total_kbytes < 1024 * _KB_PER_GB:
        return TrafficColor.RED
    return TrafficColor.DARK_RED


def bar_range(total_kbytes: int, max_traffic: int) -> float:
    """Bar value on a 0 to 1000 scale; 0 when there is nothing to scale to."""
    if max_traffic <= 0:
        return 0.0
    return total_kbytes * MAX_RANGE / max_traffic


def bar_width(range_value: float, width: int, log_scale: bool) -> int:
    """Pixel width of a bar of ``range_value`` in a cell ``width`` wide."""
    if log_scale:
        return int(math.log(range_value + 1) * width / math.log(MAX_RANGE + 1))
    return int(range_value * width / MAX_RANGE)


def column_widths(total_width: int, scale: float = 1.0) -> list[int]:
    """Widths of the date, upload, download, total and chart columns.

    ``scale`` is the display scaling factor applied to the fixed limits.
    """
    if total_width <= 0:
        raise ValueError("list width must be positive")

    def dpi(value: int) -> int:
        return int(value * scale)

    width_date = min(total_width * 3 // 11, dpi(_DATE_COLUMN_MAX))
    width_traffic = min(total_width * 2 // 11, dpi(_TRAFFIC_COLUMN_MAX))
    width_chart = (
        total_width
        - (_COLUMN_COUNT - 2) * width_traffic
        - width_date
        - dpi(_SCROLLBAR_RESERVE)
        - 1
    )
    return [width_date, width_traffic, width_traffic, width_traffic, width_chart]