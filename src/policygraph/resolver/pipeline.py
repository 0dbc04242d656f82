"""Resolution pipeline driver."""

from __future__ import annotations

from typing import Any, Optional

from ..config import ResolverConfig, load_resolver_config_from_env
from ..logging import get_resolver_logger
from .account import AccountResolver
from .base import ResolverPass, validate_identity
from .duplicate import DuplicateResolver
from .namespace import NamespaceResolver
from .ordering import FlattenResolver
from .owner import OwnerResolver
from .relative import RelativePathResolver

logger = get_resolver_logger(__name__, resolver="pipeline")


class Resolver:
    """Runs every resolution pass, in order, over a raw record graph.

    A graph must be resolved exactly once: running the passes again over
    resolved records prefixes their namespaces a second time.

    Example::

        records = Resolver.resolve(policy, "acme", "acme:user:admin")
    """

    passes: tuple[type[ResolverPass], ...] = (
        AccountResolver,
        NamespaceResolver,
        RelativePathResolver,
        OwnerResolver,
        FlattenResolver,
        DuplicateResolver,
    )

    def __init__(self, account: str, ownerid: str) -> None:
        validate_identity(account, ownerid)
        self.account = account
        self.ownerid = ownerid

    @classmethod
    def from_config(cls, config: ResolverConfig) -> Resolver:
        account, ownerid = config.require_identity()
        return cls(account, ownerid)

    @classmethod
    def resolve(cls, records: Any, account: str, ownerid: str) -> list[Any]:
        """Resolve ``records`` to the given default account and owner."""
        return cls(account, ownerid).run(records)

    def run(self, records: Any) -> list[Any]:
        for pass_cls in self.passes:
            resolver = pass_cls(self.account, self.ownerid)
            logger.debug("Running %s pass", resolver.name)
            records = resolver.resolve(records)
        logger.debug("Resolved %d records", len(records))
        return records


def resolve(
    records: Any,
    account: Optional[str] = None,
    ownerid: Optional[str] = None,
    config: Optional[ResolverConfig] = None,
) -> list[Any]:
    """Resolve ``records``, taking missing defaults from configuration.

    Args:
        records: A Policy, a record, or a nested list of records.
        account: Default account; falls back to ``config.account``.
        ownerid: Default owner; falls back to ``config.ownerid``.
        config: ResolverConfig (if None, loads from environment when
            ``account`` or ``ownerid`` is missing).

    Raises:
        ConfigurationError: if no account or ownerid can be found.
    """
    if account is None or ownerid is None:
        if config is None:
            config = load_resolver_config_from_env()
        account = account or config.account
        ownerid = ownerid or config.ownerid
    return Resolver.resolve(records, account, ownerid)
