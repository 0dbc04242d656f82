"""Relationship statements: grants, revokes, permits and denies.

Statements are not records; they are applied after every record they
mention has been created.
"""

from __future__ import annotations

from typing import Any, ClassVar

from .base import Base, as_list


class Member(Base):
    """A role granted membership, optionally with the admin option."""

    type_name: ClassVar[str] = "member"

    role: Any = None
    admin: bool = False

    @property
    def referenced_records(self) -> list[Any]:
        return as_list(self.role)

    def __str__(self) -> str:
        suffix = " (admin)" if self.admin else ""
        return f"{self.role}{suffix}"


def _role_of(member: Any) -> Any:
    return member.role if isinstance(member, Member) else member


class MembershipStatement(Base):
    """Shared shape of grants and revokes."""

    role: Any = None
    member: Any = None
    replace: bool = False

    @property
    def members(self) -> list[Any]:
        return as_list(self.member)

    @property
    def referenced_records(self) -> list[Any]:
        return as_list(self.role) + [_role_of(m) for m in self.members]


class Grant(MembershipStatement):
    """Grants ``role`` to each ``member``."""

    type_name: ClassVar[str] = "grant"

    def __str__(self) -> str:
        return f"Grant {self.role} to {', '.join(str(m) for m in self.members)}"


class Revoke(MembershipStatement):
    """Revokes ``role`` from each ``member``."""

    type_name: ClassVar[str] = "revoke"

    def delete_statement(self) -> bool:
        return True

    def __str__(self) -> str:
        return f"Revoke {self.role} from {', '.join(str(m) for m in self.members)}"


class PrivilegeStatement(Base):
    """Shared shape of permits and denies."""

    role: Any = None
    privilege: Any = None
    resource: Any = None
    replace: bool = False

    @property
    def roles(self) -> list[Any]:
        return [_role_of(r) for r in as_list(self.role)]

    @property
    def privileges(self) -> list[str]:
        return as_list(self.privilege)

    @property
    def resources(self) -> list[Any]:
        return as_list(self.resource)

    @property
    def referenced_records(self) -> list[Any]:
        return self.roles + self.resources

    def _describe(self, verb: str) -> str:
        roles = ", ".join(str(r) for r in self.roles)
        resources = ", ".join(str(r) for r in self.resources)
        return f"{verb} {roles} to {self.privileges} on {resources}"


class Permit(PrivilegeStatement):
    """Permits each ``role`` to perform ``privilege`` on each ``resource``."""

    type_name: ClassVar[str] = "permit"

    def __str__(self) -> str:
        return self._describe("Permit")


class Deny(PrivilegeStatement):
    """Removes ``privilege`` on ``resource`` from ``role``."""

    type_name: ClassVar[str] = "deny"

    def delete_statement(self) -> bool:
        return True

    def __str__(self) -> str:
        return self._describe("Deny")


__all__ = [
    "Deny",
    "Grant",
    "Member",
    "MembershipStatement",
    "Permit",
    "PrivilegeStatement",
    "Revoke",
]
