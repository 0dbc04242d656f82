"""Multi-pass resolution of policy record graphs.

Passes, in execution order:
- AccountResolver: default account for records without one
- NamespaceResolver: policy-relative ids to absolute ids
- RelativePathResolver: ``..`` references to absolute ids
- OwnerResolver: default owner for records without one
- FlattenResolver: one list, in creation order
- DuplicateResolver: reject records declared twice

CompactOutputResolver is an auxiliary pass for producing terse fixtures.
"""

from .account import AccountResolver
from .base import ResolverPass, iter_records, validate_identity
from .compact import CompactOutputResolver
from .duplicate import DuplicateResolver
from .namespace import NamespaceResolver
from .ordering import FlattenResolver, dependency_graph, sort_score, topological_order
from .owner import OwnerResolver
from .pipeline import Resolver, resolve
from .relative import RelativePathResolver, absolute_path_of

__all__ = [
    "AccountResolver",
    "CompactOutputResolver",
    "DuplicateResolver",
    "FlattenResolver",
    "NamespaceResolver",
    "OwnerResolver",
    "RelativePathResolver",
    "Resolver",
    "ResolverPass",
    "absolute_path_of",
    "dependency_graph",
    "iter_records",
    "resolve",
    "sort_score",
    "topological_order",
    "validate_identity",
]
