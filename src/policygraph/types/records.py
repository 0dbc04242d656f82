"""Entity declarations: roles, resources and policies."""

from __future__ import annotations

from typing import Any, ClassVar, Optional

from pydantic import Field, PrivateAttr

from ..config import split_roleid
from .base import Record, RoleRecord


class Role(RoleRecord):
    """A role of arbitrary kind, usually a reference such as an owner.

    Example::

        Role.from_roleid("acme:user:admin")
        # Role(account="acme", kind="user", id="admin")
    """

    type_name: ClassVar[str] = "role"

    kind: Optional[str] = None

    @classmethod
    def from_roleid(cls, roleid: str) -> Role:
        account, kind, id = split_roleid(roleid)
        return cls(account=account, kind=kind, id=id)

    @property
    def role_kind(self) -> str:
        return self.kind or self.type_name

    @property
    def resource_kind(self) -> str:
        return self.role_kind

    def __str__(self) -> str:
        return f"Role '{self.roleid}'"


class User(RoleRecord):
    type_name: ClassVar[str] = "user"

    uidnumber: Optional[int] = None
    public_keys: list[str] = Field(default_factory=list)


class Group(RoleRecord):
    type_name: ClassVar[str] = "group"

    gidnumber: Optional[int] = None


class Host(RoleRecord):
    type_name: ClassVar[str] = "host"


class Layer(RoleRecord):
    type_name: ClassVar[str] = "layer"


class Policy(RoleRecord):
    """A policy: its role owns the body, its id namespaces the body.

    The flatten pass lifts the body out of the policy with
    ``detach_body``; ``restore_body`` puts it back.
    """

    type_name: ClassVar[str] = "policy"

    body: list[Any] = Field(default_factory=list)

    _detached_body: Optional[list[Any]] = PrivateAttr(default=None)

    def detach_body(self) -> list[Any]:
        body = self.body
        self._detached_body = body
        self.body = []
        return body

    def restore_body(self) -> None:
        if self._detached_body is not None:
            self.body = self._detached_body
            self._detached_body = None


class Resource(Record):
    """A resource of arbitrary kind."""

    type_name: ClassVar[str] = "resource"

    kind: Optional[str] = None

    @property
    def resource_kind(self) -> str:
        return self.kind or self.type_name


class Variable(Record):
    type_name: ClassVar[str] = "variable"

    mime_type: Optional[str] = None


class Webservice(Record):
    type_name: ClassVar[str] = "webservice"


__all__ = [
    "Group",
    "Host",
    "Layer",
    "Policy",
    "Resource",
    "Role",
    "User",
    "Variable",
    "Webservice",
]
