from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from dashboard.constants import SORT_ASC, SORT_DESC

Row = Dict[str, Any]


@dataclass(frozen=True)
class SortConfig:
    key: Optional[str] = None
    direction: str = SORT_ASC


def columns_of(rows: Optional[Sequence[Row]]) -> List[str]:
    # header order comes from the first row only
    if not rows:
        return []
    return list(rows[0].keys())


def sort_rows(rows: Sequence[Row], key: str, direction: str = SORT_ASC) -> List[Row]:
    """
    Return a sorted copy of rows by one column, never touching the input.
    Stable in both directions; values that do not compare natively
    (e.g. None next to int) are compared as strings.
    """
    reverse = direction == SORT_DESC
    try:
        return sorted(rows, key=lambda r: r.get(key), reverse=reverse)
    except TypeError:
        return sorted(rows, key=lambda r: str(r.get(key)), reverse=reverse)


class TableControls:
    """Sort state over one canonical, unsorted list of rows."""

    def __init__(self, data: Optional[Sequence[Row]] = None, sort_config: Optional[SortConfig] = None):
        self._data: List[Row] = list(data or [])
        self.sort_config = sort_config or SortConfig()

    def set_data(self, data: Optional[Sequence[Row]]) -> None:
        self._data = list(data or [])

    @property
    def columns(self) -> List[str]:
        return columns_of(self._data)

    def handle_sort(self, key: str) -> SortConfig:
        prev = self.sort_config
        if prev.key == key and prev.direction == SORT_ASC:
            direction = SORT_DESC
        else:
            direction = SORT_ASC
        self.sort_config = SortConfig(key=key, direction=direction)
        return self.sort_config

    def reset(self) -> None:
        self.sort_config = SortConfig()

    @property
    def processed_data(self) -> List[Row]:
        if not self.sort_config.key:
            return list(self._data)
        return sort_rows(self._data, self.sort_config.key, self.sort_config.direction)

    def sort_icon(self, column: str) -> str:
        if self.sort_config.key != column:
            return ""
        return "↑" if self.sort_config.direction == SORT_ASC else "↓"
