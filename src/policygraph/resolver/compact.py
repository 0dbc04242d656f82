"""Compaction of resolved records for terse expected-output fixtures."""

from __future__ import annotations

from typing import Any

from ..capabilities import RoleBearing, has_settable_account, has_settable_owner, referenced_records_of
from .base import ResolverPass


class CompactOutputResolver(ResolverPass):
    """Unsets attributes which only repeat the resolver defaults.

    Expects pre-flattened input. ``account`` values equal to the resolver
    account and ``owner`` values whose roleid equals the resolver ownerid
    are set to None. Not part of the resolution pipeline.
    """

    name = "compact"

    def resolve(self, records: Any) -> Any:
        self.traverse(records, set(), self.resolve_owner)
        self.traverse(records, set(), self.resolve_account)
        return records

    def resolve_account(self, record: Any, visited: set[int]) -> None:
        if has_settable_account(record) and record.account == self.account:
            record.account = None
        self.traverse(referenced_records_of(record), visited, self.resolve_account)

    def resolve_owner(self, record: Any, visited: set[int]) -> None:
        if has_settable_owner(record):
            owner = record.owner
            if isinstance(owner, RoleBearing) and owner.roleid == self.ownerid:
                record.owner = None
        self.traverse(referenced_records_of(record), visited, self.resolve_owner)
