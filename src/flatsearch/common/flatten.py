from __future__ import annotations

from collections.abc import Mapping
from typing import Iterable

from flatsearch.common.errors import EmptyBatchError
from flatsearch.common.types import ListingTable, RawListing


def flatten_listings(listings: Iterable[RawListing]) -> ListingTable:
    """Project a batch of listings onto the fields every listing has.

    A field missing from any one listing is dropped for the whole batch;
    nothing is padded. Columns keep the first listing's key order and
    nested values are copied into their cell unchanged.
    """
    batch = list(listings)
    if not batch:
        raise EmptyBatchError()
    for index, listing in enumerate(batch):
        if not isinstance(listing, Mapping):
            raise TypeError(f"listing at index {index} is {type(listing).__name__}, expected a mapping")

    common = set(batch[0].keys())
    for listing in batch[1:]:
        common.intersection_update(listing.keys())

    columns = tuple(key for key in batch[0].keys() if key in common)
    rows = tuple({key: listing[key] for key in columns} for listing in batch)
    return ListingTable(columns=columns, rows=rows)


def dropped_fields(listings: Iterable[RawListing], table: ListingTable) -> set[str]:
    seen: set[str] = set()
    for listing in listings:
        seen.update(listing.keys())
    return seen - set(table.columns)
