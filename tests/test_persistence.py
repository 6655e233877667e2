import json
import os
import tempfile
import unittest
from datetime import date, datetime

from data import persistence
from data.exceptions import ParseError
from data.models import ElectronicItem, GroceryItem, InventoryItem, Item
from data.repository import InventoryRepository


class TestPersistence(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.path = os.path.join(self._tmp.name, "inventory.json")

    def tearDown(self):
        self._tmp.cleanup()

    def _write(self, text):
        with open(self.path, "w", encoding="utf-8") as f:
            f.write(text)

    def test_round_trip_electronics(self):
        items = [
            ElectronicItem(1, "Laptop", 10, "Macbook", 24),
            ElectronicItem(2, "Smartphone", 20, "Tecno", 12),
        ]
        self.assertTrue(persistence.save(InventoryRepository.from_items(items), self.path))
        loaded = persistence.load(self.path, ElectronicItem)
        self.assertCountEqual(loaded, items)

    def test_round_trip_dates(self):
        groceries = [GroceryItem(1, "Oats", 50, date(2026, 10, 26)), GroceryItem(2, "Jam", 0, date(2026, 11, 2))]
        persistence.save(InventoryRepository.from_items(groceries), self.path)
        self.assertEqual(persistence.load(self.path, GroceryItem), groceries)

        added = datetime(2026, 10, 19, 14, 30, 5, 123456)
        records = [InventoryItem(1, "Laptop", 5, added)]
        persistence.save(InventoryRepository.from_items(records), self.path)
        loaded = persistence.load(self.path, InventoryItem)
        self.assertEqual(loaded, records)
        self.assertEqual(loaded[0].date_added, added)

    def test_round_trip_mixed_item_types(self):
        items = [
            ElectronicItem(1, "Laptop", 10, "Macbook", 24),
            GroceryItem(2, "Oats", 5, date(2026, 1, 1)),
            Item(3, "Cable", 40),
        ]
        persistence.save(InventoryRepository.from_items(items), self.path)
        loaded = persistence.load(self.path, Item, strict=True)
        self.assertCountEqual(loaded, items)
        self.assertEqual([type(item) for item in loaded], [ElectronicItem, GroceryItem, Item])
        self.assertEqual(loaded[0].brand, "Macbook")
        self.assertEqual(loaded[1].expiry_date, date(2026, 1, 1))

    def test_load_rejects_other_item_types(self):
        persistence.save(InventoryRepository.from_items([GroceryItem(1, "Oats", 5, date(2026, 1, 1))]), self.path)
        with self.assertRaises(ParseError) as ctx:
            persistence.load(self.path, ElectronicItem, strict=True)
        self.assertIn("'GroceryItem'", str(ctx.exception))
        with self.assertLogs("data.persistence", level="ERROR"):
            self.assertEqual(persistence.load(self.path, ElectronicItem), [])

    def test_load_missing_type_tag(self):
        self._write('[{"id": 1, "name": "Laptop", "quantity": 5}]')
        with self.assertRaises(ParseError) as ctx:
            persistence.load(self.path, Item, strict=True)
        self.assertIn("no type tag", str(ctx.exception))

    def test_load_unknown_type_tag(self):
        self._write('[{"type": "Spaceship", "id": 1, "name": "Laptop", "quantity": 5}]')
        with self.assertRaises(ParseError):
            persistence.load(self.path, Item, strict=True)

    def test_round_trip_empty(self):
        persistence.save(InventoryRepository(), self.path)
        self.assertEqual(persistence.load(self.path, Item, strict=True), [])

    def test_file_is_labeled_json(self):
        persistence.save(InventoryRepository.from_items([Item(1, "Laptop", 5)]), self.path)
        with open(self.path, encoding="utf-8") as f:
            records = json.load(f)
        self.assertEqual(records, [{"type": "Item", "id": 1, "name": "Laptop", "quantity": 5}])

    def test_save_overwrites(self):
        self._write("old content")
        persistence.save(InventoryRepository.from_items([Item(2, "Monitor", 7)]), self.path)
        self.assertEqual(persistence.load(self.path, Item), [Item(2, "Monitor", 7)])

    def test_load_missing_file(self):
        missing = os.path.join(self._tmp.name, "nope.json")
        self.assertEqual(persistence.load(missing, Item), [])
        self.assertEqual(persistence.load(missing, Item, strict=True), [])

    def test_load_malformed_json_is_reported(self):
        self._write("{not json")
        with self.assertLogs("data.persistence", level="ERROR") as logs:
            self.assertEqual(persistence.load(self.path, Item), [])
        self.assertIn("ParseError", logs.output[0])

    def test_load_malformed_strict_raises(self):
        self._write('{"id": 1}')
        with self.assertRaises(ParseError):
            persistence.load(self.path, Item, strict=True)

    def test_load_missing_field(self):
        self._write('[{"type": "Item", "id": 1, "name": "Laptop"}]')
        with self.assertRaises(ParseError) as ctx:
            persistence.load(self.path, Item, strict=True)
        self.assertIn("quantity", str(ctx.exception))

    def test_load_wrong_field_type(self):
        self._write('[{"type": "Item", "id": "1", "name": "Laptop", "quantity": 5}]')
        with self.assertLogs("data.persistence", level="ERROR"):
            self.assertEqual(persistence.load(self.path, Item), [])

    def test_load_negative_quantity(self):
        self._write('[{"type": "Item", "id": 1, "name": "Laptop", "quantity": -5}]')
        with self.assertRaises(ParseError):
            persistence.load(self.path, Item, strict=True)

    def test_load_bad_date(self):
        self._write('[{"type": "GroceryItem", "id": 1, "name": "Oats", "quantity": 5, "expiry_date": "soon"}]')
        with self.assertRaises(ParseError):
            persistence.load(self.path, GroceryItem, strict=True)

    def test_save_unwritable_path_is_reported(self):
        bad_path = os.path.join(self._tmp.name, "missing_dir", "inventory.json")
        with self.assertLogs("data.persistence", level="ERROR"):
            self.assertFalse(persistence.save(InventoryRepository.from_items([Item(1, "Laptop", 5)]), bad_path))

    def test_load_repository(self):
        items = [Item(1, "Laptop", 5), Item(2, "Monitor", 7)]
        persistence.save(InventoryRepository.from_items(items), self.path)
        repository = persistence.load_repository(self.path, Item)
        self.assertEqual(repository.get_item(2), Item(2, "Monitor", 7))

    def test_load_repository_with_duplicate_ids(self):
        self._write('[{"type": "Item", "id": 1, "name": "A", "quantity": 1}, {"type": "Item", "id": 1, "name": "B", "quantity": 2}]')
        with self.assertLogs("data.persistence", level="ERROR"):
            repository = persistence.load_repository(self.path, Item)
        self.assertEqual(len(repository), 0)


if __name__ == "__main__":
    unittest.main()
