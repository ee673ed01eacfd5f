"""
Row Predicates

Each predicate answers one question about a (caller, row) pair, both in
Python (for rows about to be written) and as a SQL clause (for filtering
reads and locating rows to update/delete). Policies OR predicates together;
predicates never know about each other.
"""

from abc import ABC, abstractmethod
from typing import Any

from sqlalchemy import false, true
from sqlalchemy.sql.elements import ColumnElement

from .context import AccessContext


class Predicate(ABC):
    """One branch of a row policy"""

    @abstractmethod
    def matches(self, row: Any, ctx: AccessContext) -> bool:
        pass

    @abstractmethod
    def clause(self, model: Any, ctx: AccessContext) -> ColumnElement:
        pass

    def __repr__(self) -> str:
        return self.__class__.__name__


class _ColumnPredicate(Predicate):
    def __init__(self, column: str = "tenant_id"):
        self.column = column

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.column!r})"


class TenantMember(_ColumnPredicate):
    """Row's tenant is one the caller actively belongs to"""

    def matches(self, row: Any, ctx: AccessContext) -> bool:
        tenant_id = getattr(row, self.column, None)
        return tenant_id is not None and tenant_id in ctx.tenant_ids

    def clause(self, model: Any, ctx: AccessContext) -> ColumnElement:
        if not ctx.tenant_ids:
            return false()
        return getattr(model, self.column).in_(list(ctx.tenant_ids))


class TenantOwner(_ColumnPredicate):
    """Caller holds the owner role in the row's tenant"""

    def matches(self, row: Any, ctx: AccessContext) -> bool:
        tenant_id = getattr(row, self.column, None)
        return tenant_id is not None and tenant_id in ctx.owned_tenant_ids

    def clause(self, model: Any, ctx: AccessContext) -> ColumnElement:
        if not ctx.owned_tenant_ids:
            return false()
        return getattr(model, self.column).in_(list(ctx.owned_tenant_ids))


class NullTenant(_ColumnPredicate):
    """
    Row has no tenant yet.

    Migration carve-out for rows created before multi-tenancy. Only ever
    attached to select policies.
    """

    def matches(self, row: Any, ctx: AccessContext) -> bool:
        return getattr(row, self.column, None) is None

    def clause(self, model: Any, ctx: AccessContext) -> ColumnElement:
        return getattr(model, self.column).is_(None)


class SelfRow(_ColumnPredicate):
    """
    Row's subject is the caller.

    Legacy single-tenant rule for a user's own profile. Only ever attached
    to select policies, so a forged subject id cannot be used to write.
    """

    def __init__(self, column: str = "id"):
        super().__init__(column)

    def matches(self, row: Any, ctx: AccessContext) -> bool:
        return ctx.user_id is not None and getattr(row, self.column, None) == ctx.user_id

    def clause(self, model: Any, ctx: AccessContext) -> ColumnElement:
        if ctx.user_id is None:
            return false()
        return getattr(model, self.column) == ctx.user_id


class _FlagPredicate(Predicate):
    """Predicate decided by the caller alone, independent of the row"""

    def granted(self, ctx: AccessContext) -> bool:
        raise NotImplementedError

    def matches(self, row: Any, ctx: AccessContext) -> bool:
        return self.granted(ctx)

    def clause(self, model: Any, ctx: AccessContext) -> ColumnElement:
        return true() if self.granted(ctx) else false()


class PlatformAdmin(_FlagPredicate):
    def granted(self, ctx: AccessContext) -> bool:
        return ctx.is_admin


class SuperAdmin(_FlagPredicate):
    """Bypasses tenant scoping on the tables it is attached to"""

    def granted(self, ctx: AccessContext) -> bool:
        return ctx.is_super_admin


class ServiceRole(_FlagPredicate):
    """Service-level credential used by system writers"""

    def granted(self, ctx: AccessContext) -> bool:
        return ctx.is_service
