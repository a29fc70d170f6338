from dataclasses import dataclass
from typing import Dict, Optional, Tuple

SENTINEL = "N/A"

COLUMN_KINDS = ("text", "integer", "currency", "percent", "date")


@dataclass(frozen=True)
class ColumnSpec:
    """
    One canonical display field and where it comes from in the raw payload.
    """

    key: str
    label: str
    sources: Tuple[str, ...]   # candidate raw field names, first present wins
    kind: str = "text"         # text / integer / currency / percent / date
    scale: float = 1.0         # multiplier for numeric kinds (derived amounts)
    searchable: bool = False   # gets a dedicated search box

    def __post_init__(self):
        if self.kind not in COLUMN_KINDS:
            raise ValueError(f"{self.key}: unknown column kind '{self.kind}'")


@dataclass(frozen=True)
class TableSchema:
    """
    The fixed field set of one table kind.
    """

    name: str
    title: str
    columns: Tuple[ColumnSpec, ...]
    date_range: Optional[Tuple[str, str]] = None  # (lower-bound field, upper-bound field)

    @property
    def keys(self) -> Tuple[str, ...]:
        return tuple(c.key for c in self.columns)

    @property
    def searchable_keys(self) -> Tuple[str, ...]:
        return tuple(c.key for c in self.columns if c.searchable)

    @property
    def labels(self) -> Dict[str, str]:
        return {c.key: c.label for c in self.columns}

    def column(self, key: str) -> ColumnSpec:
        for c in self.columns:
            if c.key == key:
                return c
        raise KeyError(f"{self.name}: no column '{key}'")
