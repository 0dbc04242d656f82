"""Default ownership assignment."""

from __future__ import annotations

from typing import Any

from ..capabilities import has_settable_owner
from ..types import Role
from .base import ResolverPass


def policy_roleid(policy: Any) -> str:
    return f"{policy.account}:policy:{policy.id}"


class OwnerResolver(ResolverPass):
    """Sets the owner of every ownable record which doesn't specify one.

    Within a policy the default owner is the policy role. For global records
    it is the ``ownerid`` given to the constructor. Referenced records are
    not visited: a reference such as ``owner: !group admins`` stays a bare
    reference.
    """

    name = "owner"

    def resolve(self, records: Any) -> Any:
        self.traverse(records, set(), self.resolve_owner, self.on_resolve_policy)
        return records

    def resolve_owner(self, record: Any, visited: set[int]) -> None:
        if has_settable_owner(record) and record.owner is None:
            record.owner = Role.from_roleid(self.ownerid)

    def on_resolve_policy(self, policy: Any, visited: set[int]) -> None:
        ownerid = policy_roleid(policy)
        self.logger.debug("Defaulting owner to %s", ownerid, policy_id=policy.id)
        with self.scoped("ownerid", ownerid):
            self.traverse(policy.body, visited, self.resolve_owner, self.on_resolve_policy)
