"""
JSON-file backed to-do store.

The whole collection lives in memory as a dict keyed by item id and the
backing file is rewritten in full after every successful mutation.
"""

import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from . import config
from .models import ToDoItem

logger = logging.getLogger(__name__)

# Snapshot written back by ToDo.restore_db()
SAMPLE_ITEMS = [
    ToDoItem(id=1, title="Learn Go / GoLang", is_done=False),
    ToDoItem(id=2, title="Learn Kubernetes", is_done=False),
    ToDoItem(id=3, title="Learn Python", is_done=True),
    ToDoItem(id=4, title="Set up the build pipeline", is_done=False),
    ToDoItem(id=5, title="Write unit tests for the todo store", is_done=True),
]


class ToDoError(Exception):
    """Base class for every error raised by the store."""


class StoreIOError(ToDoError):
    """The backing file could not be read, parsed or written."""


class ItemNotFoundError(ToDoError):
    pass


class DuplicateItemError(ToDoError):
    pass


def _copy_item(item: ToDoItem) -> ToDoItem:
    # Round-trips through the on-disk mapping so bad field types fail early
    if not isinstance(item, ToDoItem):
        raise TypeError(f"expected ToDoItem, got {type(item).__name__}")
    return ToDoItem.from_dict(item.to_dict())


def _check_id(item_id) -> int:
    # bool is a subclass of int; True would otherwise match item 1
    if not isinstance(item_id, int) or isinstance(item_id, bool):
        raise ValueError(f"todo id must be an integer, got {item_id!r}")
    return item_id


class ToDo:
    """
    In-memory to-do collection synchronized to a single JSON file.

    Construction loads the file (creating it when missing); a failed load
    raises StoreIOError and no store is returned.
    """

    def __init__(self, db_file_name: Union[str, Path, None] = None,
                 seed: Optional[Iterable[ToDoItem]] = None):
        self._db_file_name = Path(db_file_name or config.default_db_file_name())
        self._seed = tuple(_copy_item(item) for item in (SAMPLE_ITEMS if seed is None else seed))
        seed_ids = [item.id for item in self._seed]
        if len(seed_ids) != len(set(seed_ids)):
            raise ValueError("seed dataset contains duplicate ids")

        self._items: Dict[int, ToDoItem] = self._load()
        logger.info(f"Loaded {len(self._items)} todo items from {self._db_file_name}")

    @property
    def db_file_name(self) -> Path:
        return self._db_file_name

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id) -> bool:
        if not isinstance(item_id, int) or isinstance(item_id, bool):
            return False
        return item_id in self._items

    # --- persistence ---

    def _fail(self, message: str, error: Exception):
        logger.error(f"{message}: {error}", exc_info=True)
        raise StoreIOError(f"{message}: {error}") from error

    def _load(self) -> Dict[int, ToDoItem]:
        path = self._db_file_name
        try:
            if not path.exists():
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_text("[]", encoding="utf-8")
            raw = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            self._fail(f"cannot open todo database {path}", e)

        if not raw.strip():
            return {}

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            self._fail(f"malformed todo database {path}", e)
        if not isinstance(data, list):
            self._fail(f"malformed todo database {path}",
                       ValueError(f"expected a JSON array, got {type(data).__name__}"))

        items = {}
        for entry in data:
            try:
                item = ToDoItem.from_dict(entry)
            except ValueError as e:
                self._fail(f"malformed todo database {path}", e)
            if item.id in items:
                self._fail(f"malformed todo database {path}",
                           ValueError(f"duplicate todo id {item.id}"))
            items[item.id] = item
        return items

    def _save(self, items: Dict[int, ToDoItem]):
        """Write `items` to the backing file, then make them the current collection."""
        data = [item.to_dict() for item in items.values()]
        try:
            self._db_file_name.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
        except OSError as e:
            self._fail(f"cannot write todo database {self._db_file_name}", e)
        self._items = items
        logger.debug(f"Wrote {len(data)} todo items to {self._db_file_name}")

    # --- operations ---

    def add_item(self, item: ToDoItem):
        item = _copy_item(item)
        if item.id in self._items:
            raise DuplicateItemError("todo trying to add already exists")
        items = dict(self._items)
        items[item.id] = item
        self._save(items)
        logger.debug(f"Added todo {item.id}")

    def get_item(self, item_id: int) -> ToDoItem:
        item = self._items.get(_check_id(item_id))
        if item is None:
            raise ItemNotFoundError("todo trying to fetch doesnt exists")
        return replace(item)

    def update_item(self, item: ToDoItem):
        """Replace the stored item with the same id; every field is overwritten."""
        item = _copy_item(item)
        if item.id not in self._items:
            raise ItemNotFoundError("todo trying to update doesnt exists")
        items = dict(self._items)
        items[item.id] = item
        self._save(items)
        logger.debug(f"Updated todo {item.id}")

    def delete_item(self, item_id: int):
        if _check_id(item_id) not in self._items:
            raise ItemNotFoundError("todo trying to delete doesnt exists")
        items = dict(self._items)
        del items[item_id]
        self._save(items)
        logger.debug(f"Deleted todo {item_id}")

    def change_item_done_status(self, item_id: int, value: bool):
        item = self._items.get(_check_id(item_id))
        if item is None:
            raise ItemNotFoundError("todo trying to update doesnt exists")
        self.update_item(replace(item, is_done=value))

    def get_all_items(self) -> List[ToDoItem]:
        return [replace(item) for item in self._items.values()]

    def delete_all(self):
        self._save({})
        logger.info(f"Deleted all todo items in {self._db_file_name}")

    def restore_db(self):
        """Reset the collection and the backing file to the seed dataset."""
        self._save({item.id: replace(item) for item in self._seed})
        logger.info(f"Restored {len(self._items)} sample todo items to {self._db_file_name}")
