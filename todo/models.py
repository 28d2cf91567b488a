import json
from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class ToDoItem:
    """A single to-do record"""
    id: int = 0
    title: str = ""
    is_done: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {"Id": self.id, "Title": self.title, "IsDone": self.is_done}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ToDoItem":
        """
        Build an item from its on-disk object.
        Raises ValueError when a key is missing or has the wrong type.
        """
        if not isinstance(data, dict):
            raise ValueError(f"todo item must be an object, got {type(data).__name__}")
        try:
            item_id, title, is_done = data["Id"], data["Title"], data["IsDone"]
        except KeyError as e:
            raise ValueError(f"todo item is missing key {e}") from e

        # bool is a subclass of int
        if not isinstance(item_id, int) or isinstance(item_id, bool):
            raise ValueError(f"todo Id must be an integer, got {item_id!r}")
        if not isinstance(title, str):
            raise ValueError(f"todo Title must be a string, got {title!r}")
        if not isinstance(is_done, bool):
            raise ValueError(f"todo IsDone must be a boolean, got {is_done!r}")
        return cls(id=item_id, title=title, is_done=is_done)

    @classmethod
    def from_json(cls, text: str) -> "ToDoItem":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(f"invalid todo json: {e}") from e
        return cls.from_dict(data)
