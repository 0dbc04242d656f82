"""Capability checks for duck-typed records.

Resolver passes never assume a common base type: they ask whether a record
exposes a given field, and whether that field can be assigned. Any object
that provides the attributes below takes part in resolution, whether or not
it comes from ``policygraph.types``.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class Identifiable(Protocol):
    id: Optional[str]


@runtime_checkable
class Accountable(Protocol):
    account: Optional[str]


@runtime_checkable
class Ownable(Protocol):
    owner: Any


@runtime_checkable
class Annotatable(Protocol):
    annotations: Optional[dict[str, str]]


@runtime_checkable
class RoleBearing(Protocol):
    @property
    def roleid(self) -> str: ...


def is_settable(record: Any, field: str) -> bool:
    """True if ``field`` can be assigned on ``record``.

    A read-only property (no setter) is the only shape treated as not
    settable; plain attributes and model fields are.
    """
    attr = getattr(type(record), field, None)
    if isinstance(attr, property):
        return attr.fset is not None
    return True


def has_settable_id(record: Any) -> bool:
    return isinstance(record, Identifiable) and is_settable(record, "id")


def has_settable_account(record: Any) -> bool:
    return isinstance(record, Accountable) and is_settable(record, "account")


def has_settable_owner(record: Any) -> bool:
    return isinstance(record, Ownable) and is_settable(record, "owner")


def referenced_records_of(record: Any) -> list[Any]:
    """``record.referenced_records``, or nothing if the record has none."""
    return getattr(record, "referenced_records", None) or []


def kind_name_of(record: Any) -> str:
    """Short type name used to tell records of different kinds apart."""
    return getattr(record, "type_name", None) or type(record).__name__.lower()


def resource_kind_of(record: Any) -> Optional[str]:
    return getattr(record, "resource_kind", None)


__all__ = [
    "Accountable",
    "Annotatable",
    "Identifiable",
    "Ownable",
    "RoleBearing",
    "has_settable_account",
    "has_settable_id",
    "has_settable_owner",
    "is_settable",
    "kind_name_of",
    "referenced_records_of",
    "resource_kind_of",
]
