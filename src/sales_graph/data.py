"""Load the sales dataset and split it into per-product series."""

from __future__ import annotations

import json
import logging
import numbers
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Any, Iterable

import numpy as np

from .theme import FIELDS

logger = logging.getLogger(__name__)

# Top-level key holding the list of records
SALES_KEY = "Sales"


class DatasetError(ValueError):
    """The sales document is unreadable or a record is malformed."""


@dataclass(frozen=True)
class SaleRecord:
    product: str
    month: str
    sales: float
    gross: float


def _number(record: dict, field: str, index: int) -> float:
    value = record[field]
    # bool is an int subclass; JSON true/false is never a sales figure
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise DatasetError(
            f"record {index}: {field!r} must be a number, got {value!r}"
        )
    try:
        number = float(value)
    except OverflowError:
        raise DatasetError(f"record {index}: {field!r} is too large") from None
    if not np.isfinite(number):
        raise DatasetError(f"record {index}: {field!r} must be finite, got {value!r}")
    return number


def _parse_record(record: Any, index: int) -> SaleRecord:
    if not isinstance(record, dict):
        raise DatasetError(f"record {index}: expected an object, got {type(record).__name__}")

    missing = [name for name in FIELDS.values() if name not in record]
    if missing:
        raise DatasetError(f"record {index}: missing fields {missing}")

    return SaleRecord(
        product=str(record[FIELDS["product"]]),
        month=str(record[FIELDS["month"]]),
        sales=_number(record, FIELDS["sales"], index),
        gross=_number(record, FIELDS["gross"], index),
    )


class SalesDataset:
    """Ordered sales records with the groupings the chart needs.

    Order matters everywhere: months appear on the x axis and products get
    their colors in the order they are first seen in the document.
    """

    def __init__(self, records: Iterable[SaleRecord]):
        self.records: list[SaleRecord] = list(records)

    @classmethod
    def from_records(cls, records: Iterable[Any]) -> SalesDataset:
        return cls(_parse_record(r, i) for i, r in enumerate(records))

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self):
        return iter(self.records)

    def months(self) -> list[str]:
        return list(dict.fromkeys(r.month for r in self.records))

    def products(self) -> list[str]:
        return list(dict.fromkeys(r.product for r in self.records))

    def by_product(self) -> dict[str, list[SaleRecord]]:
        groups: dict[str, list[SaleRecord]] = {}
        for record in self.records:
            groups.setdefault(record.product, []).append(record)
        return groups

    def max_sales(self) -> float:
        if not self.records:
            return 0.0
        return float(np.max([r.sales for r in self.records]))

    def peak(self) -> SaleRecord | None:
        """The first record holding the highest sales figure."""
        if not self.records:
            return None
        return self.records[int(np.argmax([r.sales for r in self.records]))]


def load_sales(source: str | Path | IO[str]) -> SalesDataset:
    """Read ``{"Sales": [...]}`` from a path or an open text file."""
    try:
        if hasattr(source, "read"):
            document = json.load(source)
        else:
            with open(source, encoding="utf-8") as f:
                document = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DatasetError(f"invalid JSON: {e}") from e

    if not isinstance(document, dict) or not isinstance(document.get(SALES_KEY), list):
        raise DatasetError(f"expected an object with a {SALES_KEY!r} list")

    dataset = SalesDataset.from_records(document[SALES_KEY])
    logger.debug(
        "loaded %d records, %d products, %d months",
        len(dataset), len(dataset.products()), len(dataset.months()),
    )
    return dataset
