"""Shared machinery for resolver passes: identity validation and traversal."""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Callable, Iterator, Optional

from ..config import split_roleid
from ..exceptions import ConfigurationError
from ..logging import get_resolver_logger
from ..types import Policy

Handler = Callable[[Any, set[int]], None]


def validate_identity(account: Optional[str], ownerid: Optional[str]) -> None:
    """Require an account and a fully qualified ownerid.

    Raises:
        ConfigurationError: if either is missing, or ownerid does not have
            the form ``account:kind:identifier``.
    """
    if not account:
        raise ConfigurationError("account is required")
    if not ownerid:
        raise ConfigurationError("ownerid is required")
    split_roleid(ownerid)


def iter_records(records: Any) -> Iterator[Any]:
    """Yield every record in an arbitrarily nested list of records."""
    if records is None:
        return
    if isinstance(records, (list, tuple)):
        for item in records:
            yield from iter_records(item)
    else:
        yield records


class ResolverPass(ABC):
    """Base class for a single resolution pass.

    ``account`` is the default account whenever no account is specified.
    ``ownerid`` is assigned to records without an owner, except inside a
    policy, where the policy role is the default owner.
    """

    name: str = "resolver"

    def __init__(self, account: str, ownerid: str) -> None:
        validate_identity(account, ownerid)
        self.account = account
        self.ownerid = ownerid
        self.logger = get_resolver_logger(type(self).__module__, resolver=self.name)

    @abstractmethod
    def resolve(self, records: Any) -> Any:
        raise NotImplementedError

    def traverse(
        self,
        records: Any,
        visited: set[int],
        handler: Handler,
        policy_handler: Optional[Handler] = None,
    ) -> None:
        """Call ``handler`` for each record not yet in ``visited``.

        If a record is a Policy, ``policy_handler`` is invoked after
        ``handler``. Records are keyed by object identity, because ids are
        still being rewritten while passes run.
        """
        for record in iter_records(records):
            key = id(record)
            if key in visited:
                continue
            visited.add(key)

            handler(record, visited)
            if policy_handler is not None and isinstance(record, Policy):
                policy_handler(record, visited)

    @contextmanager
    def scoped(self, attr: str, value: Any) -> Iterator[None]:
        """Set ``attr`` to ``value`` for the duration of the block."""
        saved = getattr(self, attr)
        setattr(self, attr, value)
        try:
            yield
        finally:
            setattr(self, attr, saved)


__all__ = [
    "Handler",
    "ResolverPass",
    "iter_records",
    "validate_identity",
]
