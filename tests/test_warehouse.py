import unittest
from contextlib import redirect_stdout
from datetime import date
from io import StringIO

from logic.services import ErrorKind
from logic.warehouse import WarehouseManager


class TestWarehouse(unittest.TestCase):
    def setUp(self):
        self.manager = WarehouseManager()
        self.manager.seed_data(today=date(2026, 10, 19))

    def _capture(self, func, *args):
        captured_output = StringIO()
        with redirect_stdout(captured_output):
            result = func(*args)
        return result, captured_output.getvalue().strip()

    def test_seed_data(self):
        self.assertEqual([item.name for item in self.manager.electronics.get_all_items()],
                         ["Laptop", "Smartphone", "Tablet"])
        self.assertEqual(self.manager.groceries.get_item(2).expiry_date, date(2026, 10, 22))

    def test_print_all_items(self):
        _, output = self._capture(self.manager.print_all_items)
        lines = output.splitlines()
        self.assertEqual(lines[0], "Electronic Items:")
        self.assertEqual(lines[1], "ID: 1, Name: Laptop, Quantity: 10, Brand: Macbook, Warranty: 24 months")
        self.assertEqual(lines[4], "Grocery Items:")
        self.assertEqual(lines[5], "ID: 1, Name: Oats, Quantity: 50, Expiry Date: 10/26/2026")

    def test_increase_stock_prints_updated_quantity(self):
        result, output = self._capture(self.manager.increase_stock, self.manager.electronics, 1, 5)
        self.assertTrue(result.ok)
        self.assertEqual(output, "Stock increased for item ID 1. New quantity: 15")
        self.assertEqual(self.manager.electronics.get_item(1).quantity, 15)

    def test_increase_stock_missing_item(self):
        result, output = self._capture(self.manager.increase_stock, self.manager.groceries, 99, 5)
        self.assertIs(result.error, ErrorKind.NOT_FOUND)
        self.assertEqual(output, "Item with ID 99 not found.")

    def test_increase_stock_invalid_quantity(self):
        result, output = self._capture(self.manager.increase_stock, self.manager.groceries, 2, -100)
        self.assertIs(result.error, ErrorKind.INVALID_QUANTITY)
        self.assertTrue(output.startswith("Quantity error for item ID 2:"))
        self.assertEqual(self.manager.groceries.get_item(2).quantity, 30)

    def test_remove_item(self):
        _, output = self._capture(self.manager.remove_item, self.manager.electronics, 2)
        self.assertEqual(output, "Item with ID 2 removed successfully.")
        self.assertNotIn(2, self.manager.electronics)

        _, output = self._capture(self.manager.remove_item, self.manager.electronics, 2)
        self.assertEqual(output, "Error removing item: Item with ID 2 not found.")

    def test_repositories_are_independent(self):
        self._capture(self.manager.remove_item, self.manager.electronics, 1)
        self.assertIn(1, self.manager.groceries)


if __name__ == "__main__":
    unittest.main()
