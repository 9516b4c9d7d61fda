from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Mapping

import pandas as pd


BearerToken = str
SearchFilters = Mapping[str, str]
RawListing = Mapping[str, Any]


@dataclass(frozen=True, slots=True)
class Credentials:
    api_key: str
    secret: str = field(repr=False)


@dataclass(frozen=True, slots=True)
class SearchResult:
    """Typed view over a search response body.

    The untouched body stays available as ``raw``; metadata fields the
    provider omitted come back as ``None``.
    """

    total: int | None
    actual_page: int | None
    items_per_page: int | None
    total_pages: int | None
    paginable: bool | None
    summary: list[str]
    element_list: list[dict[str, Any]]
    raw: dict[str, Any]

    @classmethod
    def from_body(cls, body: Mapping[str, Any]) -> SearchResult:
        elements = body.get("elementList")
        if not isinstance(elements, list):
            elements = []
        summary = body.get("summary") or []
        return cls(
            total=_to_int(body.get("total")),
            actual_page=_to_int(body.get("actualPage")),
            items_per_page=_to_int(body.get("itemsPerPage")),
            total_pages=_to_int(body.get("totalPages")),
            paginable=body.get("paginable") if isinstance(body.get("paginable"), bool) else None,
            summary=[str(line) for line in summary] if isinstance(summary, list) else [str(summary)],
            element_list=[item for item in elements if isinstance(item, dict)],
            raw=dict(body),
        )


@dataclass(frozen=True, slots=True)
class ListingTable:
    columns: tuple[str, ...]
    rows: tuple[dict[str, Any], ...]

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[dict[str, Any]]:
        return iter(self.rows)

    def column(self, name: str) -> list[Any]:
        if name not in self.columns:
            raise KeyError(name)
        return [row[name] for row in self.rows]

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame(list(self.rows), columns=list(self.columns))


def _to_int(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None
