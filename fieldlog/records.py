"""
Plant record model.

A record is one plant observation. There are exactly four kinds, each with
one extra attribute and its own detail clause on the listing line:

    Herb   is_medicinal   (Medicinal) / (Decorative)
    Shrub  stem_count     (Stems: N)
    Bush   has_thorns     (With Thorns) / (Smooth)
    Tree   height_meters  (H m)

Usage:
    from fieldlog.records import Herb, make_record, Category

    mint = Herb("Mint", "Temperate", True)
    oak = make_record(Category.TREE, "Oak", "Temperate", 12.5)
"""

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar, Optional, TextIO

from fieldlog.lib.catalog import Catalog, builtin_catalog


class Category(IntEnum):
    """Category tags. Values are the menu numbers the shell accepts."""
    HERB = 1
    SHRUB = 2
    BUSH = 3
    TREE = 4


# Filter value meaning "every category"
ALL_CATEGORIES = 0


def format_height(height: float) -> str:
    """Format like a default stream insertion: 12.5 -> '12.5', 12.0 -> '12'."""
    return f"{height:g}"


@dataclass(frozen=True)
class PlantRecord(ABC):
    """Common part of every record.

    Subclasses set `category` and implement `detail()`; the rest of the
    listing line is shared.
    """
    common_name: str
    ideal_climate: str

    category: ClassVar[Category]

    @abstractmethod
    def detail(self, catalog: Catalog) -> str:
        """The text inside the trailing parentheses."""

    def describe(self, index: int, catalog: Optional[Catalog] = None) -> str:
        """Build the listing line for this record at a 1-based index."""
        if catalog is None:
            catalog = builtin_catalog()
        label = catalog.label(self.category.name.lower())
        return (
            f"{index}. [{label}] {self.common_name} "
            f"[{catalog.message('climate')}: {self.ideal_climate}] "
            f"({self.detail(catalog)})"
        )

    def render(self, index: int, out: Optional[TextIO] = None, catalog: Optional[Catalog] = None) -> None:
        """Write the listing line to out (stdout by default)."""
        print(self.describe(index, catalog), file=out if out is not None else sys.stdout)


@dataclass(frozen=True)
class Herb(PlantRecord):
    is_medicinal: bool

    category: ClassVar[Category] = Category.HERB

    def detail(self, catalog: Catalog) -> str:
        return catalog.detail("herb_medicinal" if self.is_medicinal else "herb_decorative")


@dataclass(frozen=True)
class Shrub(PlantRecord):
    stem_count: int  # not range-checked; the shell asks for a count

    category: ClassVar[Category] = Category.SHRUB

    def detail(self, catalog: Catalog) -> str:
        return catalog.detail("shrub_stems", count=self.stem_count)


@dataclass(frozen=True)
class Bush(PlantRecord):
    has_thorns: bool

    category: ClassVar[Category] = Category.BUSH

    def detail(self, catalog: Catalog) -> str:
        return catalog.detail("bush_thorns" if self.has_thorns else "bush_smooth")


@dataclass(frozen=True)
class Tree(PlantRecord):
    height_meters: float

    category: ClassVar[Category] = Category.TREE

    def detail(self, catalog: Catalog) -> str:
        return catalog.detail("tree_height", height=format_height(self.height_meters))


# Closed set of record kinds, keyed by tag
RECORD_TYPES: dict[Category, type[PlantRecord]] = {
    Category.HERB: Herb,
    Category.SHRUB: Shrub,
    Category.BUSH: Bush,
    Category.TREE: Tree,
}


def parse_category(value: int) -> Category | None:
    """Map a menu number to a Category. Returns None if out of range."""
    try:
        return Category(value)
    except ValueError:
        return None


def make_record(category: int, common_name: str, ideal_climate: str, extra) -> PlantRecord:
    """Build the record kind for a category tag.

    Raises:
        ValueError: if category isn't 1-4
    """
    kind = parse_category(category)
    if kind is None:
        raise ValueError(f"Unknown plant category: {category}")
    return RECORD_TYPES[kind](common_name, ideal_climate, extra)
