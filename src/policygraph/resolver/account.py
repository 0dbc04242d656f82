"""Default account assignment."""

from __future__ import annotations

from typing import Any

from ..capabilities import has_settable_account, referenced_records_of
from .base import ResolverPass


class AccountResolver(ResolverPass):
    """Updates every unset ``account`` field to the default account."""

    name = "account"

    def resolve(self, records: Any) -> Any:
        self.logger.debug("Assigning default account %s", self.account)
        self.traverse(records, set(), self.resolve_account, self.on_resolve_policy)
        return records

    def resolve_account(self, record: Any, visited: set[int]) -> None:
        if has_settable_account(record) and record.account is None:
            record.account = self.account
        self.traverse(
            referenced_records_of(record),
            visited,
            self.resolve_account,
            self.on_resolve_policy,
        )

    def on_resolve_policy(self, policy: Any, visited: set[int]) -> None:
        self.traverse(policy.body, visited, self.resolve_account, self.on_resolve_policy)
