"""Reference catalogs for foods and workout types."""

from collections.abc import Iterable
from dataclasses import dataclass
from types import MappingProxyType
from typing import Generic, Protocol, TypeVar

ALL_CATEGORIES = "All"


@dataclass(frozen=True)
class Food:
    """Catalog food with nutrients for one standard serving."""

    id: str
    name: str
    category: str
    standard_quantity: str
    calories: float
    protein: float
    carbs: float
    fat: float
    fiber: float


@dataclass(frozen=True)
class WorkoutType:
    """Catalog workout with an average burn rate."""

    id: str
    name: str
    category: str
    calories_per_minute: float


class CatalogItem(Protocol):
    """Fields shared by every catalog record."""

    id: str
    name: str
    category: str


ItemT = TypeVar("ItemT", bound=CatalogItem)


class Catalog(Generic[ItemT]):
    """Read-only lookup table over catalog items, indexed by id and name."""

    def __init__(self, items: Iterable[ItemT]) -> None:
        self._items = tuple(items)
        self._by_id = MappingProxyType({item.id: item for item in self._items})
        self._by_name = MappingProxyType({item.name: item for item in self._items})

    def __iter__(self):
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def get(self, item_id: str) -> ItemT | None:
        """Return the item with the given id, if any."""
        return self._by_id.get(item_id)

    def find_by_name(self, name: str) -> ItemT | None:
        """Return the item whose name matches exactly."""
        return self._by_name.get(name)

    def categories(self) -> list[str]:
        """Return the filter choices, starting with the catch-all category."""
        seen: list[str] = []
        for item in self._items:
            if item.category not in seen:
                seen.append(item.category)
        return [ALL_CATEGORIES, *seen]

    def search(self, query: str = "", category: str = ALL_CATEGORIES) -> list[ItemT]:
        """Case-insensitive substring search, optionally within one category."""
        needle = query.strip().lower()
        return [
            item
            for item in self._items
            if needle in item.name.lower()
            and (category == ALL_CATEGORIES or item.category == category)
        ]
