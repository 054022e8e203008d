"""TodoItem model -- the single record kept in a todo list.

An item is created with a fresh UUID and a non-blank title, both of which
are frozen for the lifetime of the item.  Only the completion flag changes.
"""

from __future__ import annotations

from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Field names every persisted record must carry.
RECORD_FIELDS = ("id", "title", "isCompleted")


class TodoItem(BaseModel):
    """A single todo entry.

    The completion flag is stored on disk as ``isCompleted``; ``id`` and
    ``title`` keep their names.  Both spellings are accepted when
    constructing an item in code, so ``TodoItem(title="x", is_completed=True)``
    works.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: UUID = Field(
        default_factory=uuid4,
        frozen=True,
        description="Opaque unique identifier, generated at creation.",
    )
    title: str = Field(
        ...,
        min_length=1,
        frozen=True,
        description="Display text of the todo.",
    )
    is_completed: bool = Field(
        default=False,
        alias="isCompleted",
        strict=True,
        description="Whether the todo has been done.",
    )

    @field_validator("title")
    @classmethod
    def reject_blank_title(cls, value: str) -> str:
        """Titles made only of whitespace count as empty."""
        if not value.strip():
            raise ValueError("Title must not be blank.")
        return value

    def toggle(self) -> bool:
        """Flip the completion flag in place and return the new value."""
        self.is_completed = not self.is_completed
        return self.is_completed

    @property
    def marker(self) -> str:
        """Two-state completion marker used when rendering the item."""
        return "[x]" if self.is_completed else "[ ]"

    def to_json_dict(self) -> dict:
        """Serialize to a JSON-compatible dictionary using the on-disk field names."""
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def from_json_dict(cls, data: dict) -> "TodoItem":
        """Deserialize a persisted record.

        Unlike the constructor, nothing is defaulted: the record must be an
        object carrying every field in :data:`RECORD_FIELDS`, otherwise a
        ``ValueError`` is raised.  A missing ``id`` would otherwise get a
        new UUID on every load.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Todo record must be a JSON object, got {type(data).__name__}.")
        missing = [name for name in RECORD_FIELDS if name not in data]
        if missing:
            raise ValueError(f"Todo record is missing field(s): {', '.join(missing)}.")
        return cls.model_validate(data)
