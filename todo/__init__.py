from .models import ToDoItem
from .db import (
    SAMPLE_ITEMS,
    DuplicateItemError,
    ItemNotFoundError,
    StoreIOError,
    ToDo,
    ToDoError,
)

__all__ = [
    "SAMPLE_ITEMS",
    "DuplicateItemError",
    "ItemNotFoundError",
    "StoreIOError",
    "ToDo",
    "ToDoError",
    "ToDoItem",
]
