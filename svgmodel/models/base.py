"""Shared pydantic base for every document model class."""

from __future__ import annotations

from typing import TypeVar, get_args

from pydantic import BaseModel, ConfigDict

M = TypeVar("M", bound="SvgModel")


class SvgModel(BaseModel):
    """Base model with the copy helpers used by the ownership contract.

    Setters on the model classes store a deep copy of what they are given;
    getters hand back the stored object itself.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    def dup(self: M) -> M:
        """Return a full deep copy, nested containers included."""
        return self.model_copy(deep=True)


def owned(value: M | None) -> M | None:
    """Deep-copy ``value`` for storage inside another model (None passes through)."""
    if value is None:
        return None
    return value.model_copy(deep=True)


class ModelListMixin:
    """List operations shared by ElementList, PointsList and TransformList.

    Subclasses declare ``items`` and ``cursor`` fields.
    """

    @classmethod
    def item_type(cls) -> type:
        """The model class this list holds, read from its ``items`` annotation."""
        return get_args(cls.model_fields["items"].annotation)[0]

    def add(self, item) -> None:
        """Append a deep copy of ``item``; TypeError if it is not an ``item_type()``."""
        expected = self.item_type()
        if not isinstance(item, expected):
            raise TypeError(f"{type(self).__name__} holds {expected.__name__}, not {type(item).__name__}")
        self.items.append(item.model_copy(deep=True))

    def remove(self, index: int) -> None:
        """Delete the item at ``index``; later items move down by one."""
        del self.items[index]

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int):
        return self.items[index]

    def __iter__(self):
        return iter(self.items)

    def next(self):
        """Return the item under the cursor and advance.

        Past the last item the cursor rewinds to 0 and None is returned.
        """
        if self.cursor < 0 or self.cursor >= len(self.items):
            self.cursor = 0
            return None
        item = self.items[self.cursor]
        self.cursor += 1
        return item

    def previous(self):
        """Return the item under the cursor and step back.

        Before the first item the cursor moves to the last item and None is returned.
        """
        if self.cursor < 0 or self.cursor >= len(self.items):
            self.cursor = len(self.items) - 1
            return None
        item = self.items[self.cursor]
        self.cursor -= 1
        return item
