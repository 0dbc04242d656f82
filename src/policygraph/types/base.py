"""Record base classes.

``Base`` is the root of every policy statement. ``Record`` is the subset of
statements that declare an entity (a role, a resource, a policy) and are
therefore created before any relationship statement refers to them.
"""

from __future__ import annotations

from typing import Any, ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field


def as_list(value: Any) -> list[Any]:
    """Coerce ``None``, a single value, or a nested list into a flat list."""
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        result: list[Any] = []
        for item in value:
            result.extend(as_list(item))
        return result
    return [value]


class Base(BaseModel):
    """Root of every policy statement."""

    type_name: ClassVar[str] = "base"

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @property
    def referenced_records(self) -> list[Any]:
        """Records reachable from this one, used for traversal."""
        return []

    def delete_statement(self) -> bool:
        return False


class Record(Base):
    """An entity declaration: has an id, an account, an owner and annotations."""

    type_name: ClassVar[str] = "record"

    id: Optional[str] = None
    account: Optional[str] = None
    owner: Optional[Record] = None
    annotations: dict[str, str] = Field(default_factory=dict)

    @property
    def resource_kind(self) -> str:
        return self.type_name

    @property
    def resourceid(self) -> str:
        return f"{self.account}:{self.resource_kind}:{self.id}"

    @property
    def referenced_records(self) -> list[Any]:
        return as_list(self.owner)

    def __str__(self) -> str:
        return f"{type(self).__name__} '{self.id}'"


class RoleRecord(Record):
    """A record which also acts as a role, and so has a ``roleid``."""

    type_name: ClassVar[str] = "role_record"

    @property
    def role_kind(self) -> str:
        return self.type_name

    @property
    def roleid(self) -> str:
        return f"{self.account}:{self.role_kind}:{self.id}"


__all__ = [
    "Base",
    "Record",
    "RoleRecord",
    "as_list",
]
