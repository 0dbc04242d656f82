from .config import LogLevel, ResolverConfig, load_resolver_config_from_env
from .exceptions import (
    ConfigurationError,
    DependencyCycleError,
    DuplicateRecordError,
    InvalidRelativeReferenceError,
    MissingIdentifierError,
    PolicyGraphError,
    ResolutionError,
)
from .logging import (
    safe_preview,
    PolicyGraphFormatter,
    ResolverLoggerAdapter,
    setup_logging,
    get_resolver_logger,
)
from .resolver import (
    AccountResolver,
    CompactOutputResolver,
    DuplicateResolver,
    FlattenResolver,
    NamespaceResolver,
    OwnerResolver,
    RelativePathResolver,
    Resolver,
    absolute_path_of,
    resolve,
)
from .types import (
    Deny,
    Grant,
    Group,
    Host,
    Layer,
    Member,
    Permit,
    Policy,
    Record,
    Resource,
    Revoke,
    Role,
    User,
    Variable,
    Webservice,
)

__all__ = [
    'LogLevel',
    'ResolverConfig',
    'load_resolver_config_from_env',
    'ConfigurationError',
    'DependencyCycleError',
    'DuplicateRecordError',
    'InvalidRelativeReferenceError',
    'MissingIdentifierError',
    'PolicyGraphError',
    'ResolutionError',
    'safe_preview',
    'PolicyGraphFormatter',
    'ResolverLoggerAdapter',
    'setup_logging',
    'get_resolver_logger',
    'AccountResolver',
    'CompactOutputResolver',
    'DuplicateResolver',
    'FlattenResolver',
    'NamespaceResolver',
    'OwnerResolver',
    'RelativePathResolver',
    'Resolver',
    'absolute_path_of',
    'resolve',
    'Deny',
    'Grant',
    'Group',
    'Host',
    'Layer',
    'Member',
    'Permit',
    'Policy',
    'Record',
    'Resource',
    'Revoke',
    'Role',
    'User',
    'Variable',
    'Webservice',
]
