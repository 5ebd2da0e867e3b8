"""
The field log: every plant recorded in this session, in entry order.

Listings number each record by its position in the whole log, so a filtered
listing can show indices 1, 3, 7. Records are never removed or edited.
"""

import logging
import sys
from typing import Iterator, Optional, TextIO

from fieldlog.lib.catalog import Catalog, builtin_catalog
from fieldlog.records import ALL_CATEGORIES, Category, PlantRecord

logger = logging.getLogger(__name__)

VALID_FILTERS = (ALL_CATEGORIES, *(c.value for c in Category))


class FieldLog:
    """Ordered in-memory store of plant records.

    All output goes to `out`, which defaults to stdout at call time.
    """

    def __init__(self, out: Optional[TextIO] = None, catalog: Optional[Catalog] = None):
        self._records: list[PlantRecord] = []
        self._out = out
        self.catalog = catalog if catalog is not None else builtin_catalog()

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def _emit(self, key: str) -> None:
        print(self.catalog.message(key), file=self.out)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[PlantRecord]:
        return iter(tuple(self._records))

    @property
    def records(self) -> tuple[PlantRecord, ...]:
        """Snapshot of the log; the list itself is never handed out."""
        return tuple(self._records)

    def count(self, category: int = ALL_CATEGORIES) -> int:
        """Number of records a listing for this filter would show."""
        if category == ALL_CATEGORIES:
            return len(self._records)
        return sum(1 for r in self._records if r.category == category)

    def append(self, record: PlantRecord) -> None:
        """Add a record to the end of the log and confirm it."""
        self._records.append(record)
        logger.debug(
            f"Appended {record.category.name.lower()} '{record.common_name}' "
            f"at position {len(self._records)}"
        )
        self._emit("registered")

    def list_filtered(self, category: int = ALL_CATEGORIES) -> None:
        """Render the records matching a filter (0 = all, 1-4 = one category).

        An empty log prints only the empty message. Otherwise the listing is
        framed by header and footer, with the no-match message in between when
        nothing matched. Indices are positions in the full log.
        """
        if not self._records:
            self._emit("empty")
            return

        if category not in VALID_FILTERS:
            logger.warning(f"Filter {category!r} is not a known category, nothing will match")

        self._emit("header")
        matched = 0
        for position, record in enumerate(self._records, 1):
            if category == ALL_CATEGORIES or record.category == category:
                record.render(position, self.out, self.catalog)
                matched += 1

        if matched == 0:
            self._emit("no_matches")
        self._emit("footer")
        logger.debug(f"Listed {matched}/{len(self._records)} records for filter {category}")
