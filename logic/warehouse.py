# Warehouse inventory management

from datetime import date, timedelta

from data.models import ElectronicItem, GroceryItem
from data.repository import InventoryRepository
from logic.services import ErrorKind, increase_stock_service, remove_item_service
from utils.helpers import format_short_date


class WarehouseManager:
    """
    Keeps one repository for electronics and one for groceries.
    """
    def __init__(self):
        self.electronics: InventoryRepository[ElectronicItem] = InventoryRepository()
        self.groceries: InventoryRepository[GroceryItem] = InventoryRepository()

    def seed_data(self, today=None):
        today = today or date.today()
        self.electronics.add_item(ElectronicItem(1, "Laptop", 10, "Macbook", 24))
        self.electronics.add_item(ElectronicItem(2, "Smartphone", 20, "Tecno", 12))
        self.electronics.add_item(ElectronicItem(3, "Tablet", 15, "Apple", 18))

        self.groceries.add_item(GroceryItem(1, "Oats", 50, today + timedelta(days=7)))
        self.groceries.add_item(GroceryItem(2, "Bacon", 30, today + timedelta(days=3)))
        self.groceries.add_item(GroceryItem(3, "Jam", 100, today + timedelta(days=14)))

    def print_all_items(self):
        print("Electronic Items:")
        for item in self.electronics.get_all_items():
            print(f"ID: {item.id}, Name: {item.name}, Quantity: {item.quantity}, "
                  f"Brand: {item.brand}, Warranty: {item.warranty_months} months")

        print("Grocery Items:")
        for item in self.groceries.get_all_items():
            print(f"ID: {item.id}, Name: {item.name}, Quantity: {item.quantity}, "
                  f"Expiry Date: {format_short_date(item.expiry_date)}")

    def increase_stock(self, repository, item_id, quantity):
        result = increase_stock_service(repository, item_id, quantity)
        if result.ok:
            print(result.message)
        elif result.error is ErrorKind.INVALID_QUANTITY:
            print(f"Quantity error for item ID {item_id}: {result.message}")
        else:
            print(result.message)
        return result

    def remove_item(self, repository, item_id):
        result = remove_item_service(repository, item_id)
        if result.ok:
            print(result.message)
        else:
            print(f"Error removing item: {result.message}")
        return result

    def run(self):
        self.seed_data()
        self.print_all_items()
        self.increase_stock(self.electronics, 1, 5)
        self.increase_stock(self.groceries, 99, 5)
        self.increase_stock(self.groceries, 2, -100)
        self.remove_item(self.electronics, 2)
        self.remove_item(self.groceries, 42)
        self.print_all_items()


if __name__ == "__main__":
    WarehouseManager().run()
