# Data repository

from typing import Dict, Generic, Iterable, List, TypeVar

from data.exceptions import DuplicateKeyError, InvalidQuantityError, ItemNotFoundError
from data.models import HasId

T = TypeVar("T", bound=HasId)


class InventoryRepository(Generic[T]):
    """
    In-memory storage for items keyed by their ``id``.

    The repository owns the items it holds; ``get_all_items`` hands out a new
    list so callers cannot reorder or drop entries behind its back.
    """
    def __init__(self):
        self._items: Dict[int, T] = {}

    @classmethod
    def from_items(cls, items: Iterable[T]) -> "InventoryRepository[T]":
        repository = cls()
        for item in items:
            repository.add_item(item)
        return repository

    def add_item(self, item: T) -> None:
        """
        Adds an item to the repository.
        """
        if item.id in self._items:
            raise DuplicateKeyError(item.id)
        self._items[item.id] = item

    def get_item(self, item_id: int) -> T:
        """
        Retrieves an item by its ID.
        """
        try:
            return self._items[item_id]
        except KeyError:
            raise ItemNotFoundError(item_id) from None

    def remove_item(self, item_id: int) -> None:
        if item_id not in self._items:
            raise ItemNotFoundError(item_id)
        del self._items[item_id]

    def get_all_items(self) -> List[T]:
        return list(self._items.values())

    def update_item_quantity(self, item_id: int, new_quantity: int) -> None:
        # quantity is validated before the lookup
        if new_quantity < 0:
            raise InvalidQuantityError(new_quantity)
        self.get_item(item_id).quantity = new_quantity

    def __len__(self):
        return len(self._items)

    def __contains__(self, item_id):
        return item_id in self._items


if __name__ == "__main__":
    from data.models import Item
    # Example usage
    repository = InventoryRepository()
    repository.add_item(Item(1, "Laptop", 5))
    repository.add_item(Item(2, "Monitor", 7))
    repository.remove_item(1)
    print(f"Remaining items: {repository.get_all_items()}")
