# Inventory and grading errors


class InventoryError(Exception):
    """
    Base class for repository and persistence errors.
    """


class DuplicateKeyError(InventoryError, ValueError):
    def __init__(self, item_id):
        super().__init__(f"Item with ID {item_id} already exists.")
        self.item_id = item_id


class ItemNotFoundError(InventoryError, LookupError):
    def __init__(self, item_id):
        super().__init__(f"Item with ID {item_id} not found.")
        self.item_id = item_id


class InvalidQuantityError(InventoryError, ValueError):
    def __init__(self, quantity):
        super().__init__(f"Quantity cannot be negative (got {quantity}).")
        self.quantity = quantity


class ParseError(InventoryError, ValueError):
    """
    Raised when a persisted inventory file cannot be turned back into items.
    """
    def __init__(self, path, reason):
        super().__init__(f"Could not parse {path}: {reason}")
        self.path = path
        self.reason = reason


class GradingError(Exception):
    """
    Base class for problems found while reading a student results file.
    """
    def __init__(self, line_number, message):
        super().__init__(f"Line {line_number}: {message}")
        self.line_number = line_number


class MissingFieldError(GradingError):
    pass


class InvalidIdFormatError(GradingError, ValueError):
    pass


class InvalidScoreFormatError(GradingError, ValueError):
    pass


class InvalidEncodingError(GradingError, ValueError):
    pass
