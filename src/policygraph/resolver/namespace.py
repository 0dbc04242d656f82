"""Policy namespacing of record ids.

Nested policies behave like directories: a record ``db`` declared in policy
``prod`` which is itself declared in policy ``myapp`` becomes
``myapp/prod/db``. Users are the exception; they keep their own name and
take the namespace as an ``@`` suffix with ``/`` replaced by ``-``, so
``alice`` in ``myapp/prod`` becomes ``alice@myapp-prod``.
"""

from __future__ import annotations

from typing import Any, Optional

from ..capabilities import has_settable_id, referenced_records_of, resource_kind_of
from ..exceptions import MissingIdentifierError
from .base import ResolverPass


def is_blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


class NamespaceResolver(ResolverPass):
    """Forms absolute ids by prepending the namespace of the policy tree."""

    name = "namespace"

    def __init__(self, account: str, ownerid: str) -> None:
        super().__init__(account, ownerid)
        self.namespace: Optional[str] = None

    def resolve(self, records: Any) -> Any:
        self.traverse(records, set(), self.resolve_field, self.on_resolve_policy)
        return records

    def resolve_field(self, record: Any, visited: set[int]) -> None:
        if has_settable_id(record):
            record.id = self.prepend_namespace(record)

        self.traverse(
            referenced_records_of(record),
            visited,
            self.resolve_field,
            self.on_resolve_policy,
        )

    def on_resolve_policy(self, policy: Any, visited: set[int]) -> None:
        self.logger.debug("Entering policy namespace", policy_id=policy.id)
        with self.scoped("namespace", policy.id):
            self.traverse(policy.body, visited, self.resolve_field, self.on_resolve_policy)

    def prepend_namespace(self, record: Any) -> str:
        id = record.id

        if is_blank(id):
            if self.namespace is None:
                raise MissingIdentifierError(
                    f"{type(record).__name__} has a blank id",
                    record=type(record).__name__,
                )
            return self.namespace

        if resource_kind_of(record) == "user":
            return "@".join(part for part in (id, self.user_namespace) if part is not None)
        return "/".join(part for part in (self.namespace, id) if part is not None)

    @property
    def user_namespace(self) -> Optional[str]:
        if self.namespace is None:
            return None
        return self.namespace.replace("/", "-")
