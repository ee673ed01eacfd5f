"""
Access Context

Per-request snapshot of who is acting and which tenants they belong to.
Policies are evaluated against this snapshot, never against live queries,
so every check inside one unit of work sees the same membership state.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Optional
from uuid import UUID

from dinner_guard.domain.entities import PlatformRole


class Operation(str, Enum):
    """Statement kind a policy is evaluated for"""

    select = "select"
    insert = "insert"
    update = "update"
    delete = "delete"


@dataclass(frozen=True)
class Principal:
    """Authenticated identity as supplied by the API layer"""

    user_id: Optional[UUID] = None
    is_service: bool = False

    @classmethod
    def anonymous(cls) -> "Principal":
        return cls()

    @classmethod
    def service(cls) -> "Principal":
        return cls(is_service=True)


@dataclass(frozen=True)
class AccessContext:
    user_id: Optional[UUID] = None
    tenant_ids: FrozenSet[UUID] = field(default_factory=frozenset)
    owned_tenant_ids: FrozenSet[UUID] = field(default_factory=frozenset)
    platform_role: PlatformRole = PlatformRole.user
    is_service: bool = False

    @property
    def is_admin(self) -> bool:
        return self.platform_role in (PlatformRole.admin, PlatformRole.super_admin)

    @property
    def is_super_admin(self) -> bool:
        return self.platform_role == PlatformRole.super_admin

    @classmethod
    def anonymous(cls) -> "AccessContext":
        return cls()

    @classmethod
    def service(cls) -> "AccessContext":
        return cls(is_service=True)
