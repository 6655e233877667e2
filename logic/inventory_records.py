# Inventory records kept in a JSON file between runs

from datetime import datetime
from typing import Generic, List, Type, TypeVar

from data import persistence
from data.models import InventoryItem, Item
from utils.helpers import format_timestamp

T = TypeVar("T", bound=Item)


class InventoryLogger(Generic[T]):
    """
    An append-only log of items backed by a file.

    ``load_from_file`` replaces whatever is in memory with the file contents.
    """
    def __init__(self, file_path, item_type: Type[T]):
        self.file_path = file_path
        self.item_type = item_type
        self._log: List[T] = []

    def add(self, item: T):
        self._log.append(item)

    def get_all_items(self) -> List[T]:
        return list(self._log)

    def save_to_file(self) -> bool:
        return persistence.save(self, self.file_path)

    def load_from_file(self) -> int:
        self._log = persistence.load(self.file_path, self.item_type)
        return len(self._log)


class InventoryApp:
    def __init__(self, file_path):
        self._logger = InventoryLogger(file_path, InventoryItem)

    @property
    def items(self):
        return self._logger.get_all_items()

    def seed_sample_data(self, now=None):
        now = now or datetime.now()
        self._logger.add(InventoryItem(1, "Laptop", 5, now))
        self._logger.add(InventoryItem(2, "Game Console", 15, now))
        self._logger.add(InventoryItem(3, "Desktop", 10, now))
        self._logger.add(InventoryItem(4, "Monitor", 7, now))
        self._logger.add(InventoryItem(5, "Projector", 50, now))

    def save_data(self):
        if self._logger.save_to_file():
            print(f"Data saved to {self._logger.file_path}")
        else:
            print(f"Error saving file: {self._logger.file_path}")

    def load_data(self):
        count = self._logger.load_from_file()
        print(f"Loaded {count} items from {self._logger.file_path}")

    def print_all_items(self):
        for item in self._logger.get_all_items():
            print(f"{item.name} (ID: {item.id}) - Qty: {item.quantity}, Added: {format_timestamp(item.date_added)}")


def run_inventory_records(file_path):
    """
    Seeds and saves a log, then loads it into a fresh app to simulate a restart.
    """
    app = InventoryApp(file_path)
    app.seed_sample_data()
    app.save_data()

    restarted = InventoryApp(file_path)
    restarted.load_data()
    restarted.print_all_items()
    return restarted


if __name__ == "__main__":
    from utils.config import INVENTORY_DATA_FILE
    run_inventory_records(INVENTORY_DATA_FILE)
