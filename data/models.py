# Data models

from datetime import date, datetime
from typing import Any, Dict, Optional, Protocol, Type

from data.exceptions import InvalidQuantityError

# Item classes by name, filled in as subclasses are defined
_ITEM_TYPES: Dict[str, Type["Item"]] = {}


class HasId(Protocol):
    """
    Anything a repository can key: it only needs an integer ``id``.
    """
    id: int


def _check_type(key: str, value: Any, expected_type: type) -> Any:
    # bool is an int subclass; true/false is never a valid id or quantity
    if isinstance(value, bool) and expected_type is not bool:
        raise TypeError(f"field '{key}' must be {expected_type.__name__}, got bool")
    # datetime is a date subclass but does not round-trip through date.fromisoformat
    if expected_type is date and isinstance(value, datetime):
        raise TypeError(f"field '{key}' must be date, got datetime")
    if not isinstance(value, expected_type):
        raise TypeError(f"field '{key}' must be {expected_type.__name__}, got {type(value).__name__}")
    return value


def _field(data: Dict[str, Any], key: str, expected_type: type) -> Any:
    if key not in data:
        raise KeyError(f"missing field '{key}'")
    return _check_type(key, data[key], expected_type)


def item_type_for(tag: str) -> Optional[Type["Item"]]:
    """
    Returns the item class saved under ``tag``, or None for an unknown tag.
    """
    return _ITEM_TYPES.get(tag)


class Item:
    """
    Represents a stocked item: a fixed ``id`` and ``name`` and a ``quantity``
    that can never go below zero.
    """
    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        _ITEM_TYPES[cls.__name__] = cls

    def __init__(self, id: int, name: str, quantity: int = 0):
        _check_type("id", id, int)
        if id <= 0:
            raise ValueError(f"id must be a positive integer, got {id}")
        self._id = id
        self.name = _check_type("name", name, str)
        self.quantity = quantity

    @property
    def id(self) -> int:
        return self._id

    @property
    def quantity(self) -> int:
        return self._quantity

    @quantity.setter
    def quantity(self, value: int):
        _check_type("quantity", value, int)
        if value < 0:
            raise InvalidQuantityError(value)
        self._quantity = value

    def _extra_fields(self) -> Dict[str, Any]:
        return {}

    def fields(self) -> Dict[str, Any]:
        data = {"id": self.id, "name": self.name, "quantity": self.quantity}
        data.update(self._extra_fields())
        return data

    def to_dict(self) -> Dict[str, Any]:
        """
        The saved form of the item: its fields plus a ``type`` tag naming the
        class to rebuild it with.
        """
        return {"type": type(self).__name__, **self.fields()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Item":
        return cls(_field(data, "id", int), _field(data, "name", str), _field(data, "quantity", int))

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.fields() == other.fields()

    __hash__ = None

    def __repr__(self):
        fields = ", ".join(f"{key}={value!r}" for key, value in self.fields().items())
        return f"{type(self).__name__}({fields})"


_ITEM_TYPES[Item.__name__] = Item


class ElectronicItem(Item):
    def __init__(self, id: int, name: str, quantity: int, brand: str, warranty_months: int):
        super().__init__(id, name, quantity)
        self.brand = _check_type("brand", brand, str)
        self.warranty_months = _check_type("warranty_months", warranty_months, int)

    def _extra_fields(self):
        return {"brand": self.brand, "warranty_months": self.warranty_months}

    @classmethod
    def from_dict(cls, data):
        return cls(
            _field(data, "id", int),
            _field(data, "name", str),
            _field(data, "quantity", int),
            _field(data, "brand", str),
            _field(data, "warranty_months", int),
        )


class GroceryItem(Item):
    def __init__(self, id: int, name: str, quantity: int, expiry_date: date):
        super().__init__(id, name, quantity)
        self.expiry_date = _check_type("expiry_date", expiry_date, date)

    def _extra_fields(self):
        return {"expiry_date": self.expiry_date.isoformat()}

    @classmethod
    def from_dict(cls, data):
        return cls(
            _field(data, "id", int),
            _field(data, "name", str),
            _field(data, "quantity", int),
            date.fromisoformat(_field(data, "expiry_date", str)),
        )


class InventoryItem(Item):
    """
    A logged inventory record, stamped with the time it was added.
    """
    def __init__(self, id: int, name: str, quantity: int, date_added: datetime):
        super().__init__(id, name, quantity)
        self.date_added = _check_type("date_added", date_added, datetime)

    def _extra_fields(self):
        return {"date_added": self.date_added.isoformat()}

    @classmethod
    def from_dict(cls, data):
        return cls(
            _field(data, "id", int),
            _field(data, "name", str),
            _field(data, "quantity", int),
            datetime.fromisoformat(_field(data, "date_added", str)),
        )


if __name__ == "__main__":
    # Example usage
    item = ElectronicItem(1, "Laptop", 10, "Macbook", 24)
    print(item)
    print(item.to_dict())
