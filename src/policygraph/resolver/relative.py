"""Relative reference resolution.

A relative path climbs the policy tree with ``..`` segments. It is allowed
only on:

* the ``member`` of a Grant
* the ``role`` of a Permit
* an annotation value (resolved against the annotated record's id)
"""

from __future__ import annotations

from typing import Any

from ..capabilities import Annotatable, referenced_records_of
from ..exceptions import InvalidRelativeReferenceError
from ..types import Grant, Member, Permit
from .base import ResolverPass

PARENT = ".."


def absolute_path_of(path: str) -> str:
    """Collapse every ``..`` segment together with the segment before it.

    Example::

        >>> absolute_path_of("myapp/db/../users")
        'myapp/users'

    Raises:
        InvalidRelativeReferenceError: if a ``..`` has no preceding segment,
            or nothing is left once all segments are collapsed.
    """
    tokens = path.split("/")
    while PARENT in tokens:
        idx = tokens.index(PARENT)
        if idx == 0:
            raise InvalidRelativeReferenceError(f"Invalid relative reference: {path}", reference=path)
        del tokens[idx - 1 : idx + 1]
    if not tokens:
        raise InvalidRelativeReferenceError(f"Invalid relative reference: {path}", reference=path)
    return "/".join(tokens)


def is_relative(value: Any) -> bool:
    return isinstance(value, str) and PARENT in value.split("/")


class RelativePathResolver(ResolverPass):
    """Resolves ``..`` references into absolute ids."""

    name = "relative_path"

    def resolve(self, records: Any) -> Any:
        self.traverse(records, set(), self.resolve_relative_path, self.on_resolve_policy)
        return records

    def resolve_relative_path(self, record: Any, visited: set[int]) -> None:
        if isinstance(record, Grant):
            self.resolve_grant(record)
        if isinstance(record, Permit):
            self.resolve_permit(record)
        if isinstance(record, Annotatable):
            self.resolve_annotations(record)

        self.traverse(
            referenced_records_of(record),
            visited,
            self.resolve_relative_path,
            self.on_resolve_policy,
        )

    def resolve_grant(self, grant: Grant) -> None:
        for member in grant.members:
            role = member.role if isinstance(member, Member) else member
            role.id = absolute_path_of(role.id)

    def resolve_permit(self, permit: Permit) -> None:
        for role in permit.roles:
            role.id = absolute_path_of(role.id)

    def resolve_annotations(self, record: Any) -> None:
        annotations = record.annotations
        if not annotations:
            return
        for key, value in list(annotations.items()):
            if is_relative(value):
                annotations[key] = absolute_path_of("/".join([record.id, value]))

    def on_resolve_policy(self, policy: Any, visited: set[int]) -> None:
        self.traverse(policy.body, visited, self.resolve_relative_path, self.on_resolve_policy)
