"""In-memory policy record model.

Defines:
- Base / Record / RoleRecord: statement and entity roots
- Role, User, Group, Host, Layer, Policy: records which act as roles
- Resource, Variable, Webservice: resource-only records
- Member, Grant, Revoke, Permit, Deny: relationship statements
"""

from .base import Base, Record, RoleRecord, as_list
from .records import (
    Group,
    Host,
    Layer,
    Policy,
    Resource,
    Role,
    User,
    Variable,
    Webservice,
)
from .statements import (
    Deny,
    Grant,
    Member,
    MembershipStatement,
    Permit,
    PrivilegeStatement,
    Revoke,
)

__all__ = [
    "Base",
    "Deny",
    "Grant",
    "Group",
    "Host",
    "Layer",
    "Member",
    "MembershipStatement",
    "Permit",
    "Policy",
    "PrivilegeStatement",
    "Record",
    "Resource",
    "Revoke",
    "Role",
    "RoleRecord",
    "User",
    "Variable",
    "Webservice",
    "as_list",
]
