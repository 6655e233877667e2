"""
JSON persistence for repositories.

Items are written as an indented JSON array, one object per item with its
fields labeled, so the file can be read and edited by hand. Each object
carries a ``type`` tag naming its item class, so a repository holding several
item types loads back with every item rebuilt as the class it was saved as.
"""

import json
import logging
from pathlib import Path
from typing import List, Type, TypeVar

from data.exceptions import DuplicateKeyError, ParseError
from data.models import Item, item_type_for
from data.repository import InventoryRepository

logger = logging.getLogger(__name__)

ItemT = TypeVar("ItemT", bound=Item)


def save(repository, path) -> bool:
    """
    Writes every item of ``repository`` to ``path``, replacing the file.

    Returns False (and logs the reason) when the file could not be written.
    """
    path = Path(path)
    try:
        records = [item.to_dict() for item in repository.get_all_items()]
        path.write_text(json.dumps(records, ensure_ascii=False, indent=2), encoding="utf-8")
    except (OSError, TypeError, ValueError) as e:
        logger.error(f"Error saving file {path}: {e}")
        return False
    logger.info(f"Data saved to {path} ({len(records)} items)")
    return True


def _parse(path: Path, item_type: Type[ItemT]) -> List[ItemT]:
    try:
        records = json.loads(path.read_text(encoding="utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ParseError(path, f"invalid JSON ({e})") from e
    if not isinstance(records, list):
        raise ParseError(path, f"expected a list of items, got {type(records).__name__}")

    items = []
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            raise ParseError(path, f"entry {index} is not an object")
        tag = record.get("type")
        if not isinstance(tag, str):
            raise ParseError(path, f"entry {index} has no type tag")
        record_type = item_type_for(tag)
        if record_type is None or not issubclass(record_type, item_type):
            raise ParseError(path, f"entry {index} is a '{tag}', expected {item_type.__name__}")
        try:
            items.append(record_type.from_dict(record))
        except (KeyError, TypeError, ValueError) as e:
            raise ParseError(path, f"entry {index}: {e}") from e
    return items


def load(path, item_type: Type[ItemT], strict: bool = False) -> List[ItemT]:
    """
    Reads items of ``item_type`` (or its subclasses) back from ``path``.

    A missing file is not an error and gives an empty list. Malformed content
    is logged as a ParseError and also gives an empty list, unless ``strict``
    is set, in which case the ParseError propagates.
    """
    path = Path(path)
    if not path.exists():
        logger.info(f"No saved file found at {path}.")
        return []
    try:
        items = _parse(path, item_type)
    except ParseError as e:
        if strict:
            raise
        logger.error(f"ParseError: {e}")
        return []
    except OSError as e:
        if strict:
            raise
        logger.error(f"Error loading file {path}: {e}")
        return []
    logger.info(f"Loaded {len(items)} items from {path}")
    return items


def load_repository(path, item_type: Type[ItemT]) -> InventoryRepository[ItemT]:
    items = load(path, item_type)
    try:
        return InventoryRepository.from_items(items)
    except DuplicateKeyError as e:
        logger.error(f"ParseError: {ParseError(path, e)}")
        return InventoryRepository()
