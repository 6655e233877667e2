# Business services
#
# The repository signals failures with exceptions. These services catch them
# and hand back a ServiceResult instead, so display code can branch on the
# kind of failure without a try block of its own.

import logging
from enum import Enum
from typing import Any, Optional

from data.exceptions import DuplicateKeyError, InvalidQuantityError, ItemNotFoundError

logger = logging.getLogger(__name__)


class ErrorKind(Enum):
    DUPLICATE_KEY = "duplicate_key"
    NOT_FOUND = "not_found"
    INVALID_QUANTITY = "invalid_quantity"


class ServiceResult:
    def __init__(self, ok: bool, value: Any = None, error: Optional[ErrorKind] = None, message: str = ""):
        self.ok = ok
        self.value = value
        self.error = error
        self.message = message

    @classmethod
    def success(cls, value=None, message=""):
        return cls(True, value=value, message=message)

    @classmethod
    def failure(cls, error: ErrorKind, message: str):
        return cls(False, error=error, message=message)

    def __bool__(self):
        return self.ok

    def __repr__(self):
        if self.ok:
            return f"ServiceResult(ok=True, value={self.value!r})"
        return f"ServiceResult(ok=False, error={self.error}, message='{self.message}')"


def _failure(error_kind, exc):
    logger.debug(f"{error_kind.value}: {exc}")
    return ServiceResult.failure(error_kind, str(exc))


def add_item_service(repository, item):
    """
    Service to add a new item.
    """
    try:
        repository.add_item(item)
    except DuplicateKeyError as e:
        return _failure(ErrorKind.DUPLICATE_KEY, e)
    return ServiceResult.success(item, f"Item '{item.name}' added successfully with ID {item.id}.")


def get_item_service(repository, item_id):
    """
    Service to retrieve an item.
    """
    try:
        return ServiceResult.success(repository.get_item(item_id))
    except ItemNotFoundError as e:
        return _failure(ErrorKind.NOT_FOUND, e)


def remove_item_service(repository, item_id):
    try:
        repository.remove_item(item_id)
    except ItemNotFoundError as e:
        return _failure(ErrorKind.NOT_FOUND, e)
    return ServiceResult.success(item_id, f"Item with ID {item_id} removed successfully.")


def update_quantity_service(repository, item_id, new_quantity):
    try:
        repository.update_item_quantity(item_id, new_quantity)
    except InvalidQuantityError as e:
        return _failure(ErrorKind.INVALID_QUANTITY, e)
    except ItemNotFoundError as e:
        return _failure(ErrorKind.NOT_FOUND, e)
    return ServiceResult.success(repository.get_item(item_id))


def increase_stock_service(repository, item_id, amount):
    """
    Adds ``amount`` to the stored quantity. The result carries the item as it
    is after the update.
    """
    current = get_item_service(repository, item_id)
    if not current:
        return current
    result = update_quantity_service(repository, item_id, current.value.quantity + amount)
    if result:
        result.message = f"Stock increased for item ID {item_id}. New quantity: {result.value.quantity}"
    return result


if __name__ == "__main__":
    from data.models import Item
    from data.repository import InventoryRepository

    # Example usage of item services
    repository = InventoryRepository()
    print(add_item_service(repository, Item(10, "Service Item 1", 3)).message)
    print(add_item_service(repository, Item(10, "Duplicate Service Item", 1)).message)  # Test duplicate
    print(increase_stock_service(repository, 10, 5).message)
    print(get_item_service(repository, 999).message)
