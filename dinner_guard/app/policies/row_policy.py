"""
Row Policy

Declarative per-table authorization: for each operation, the list of
predicates of which at least one must hold. An operation with no
predicates is denied outright.
"""

from typing import Any, Dict, Iterable, Tuple

from sqlalchemy import false, or_
from sqlalchemy.sql.elements import ColumnElement

from .context import AccessContext, Operation
from .predicates import Predicate


class PolicyViolation(Exception):
    """A written row does not satisfy the table's policy"""

    def __init__(self, table: str, operation: Operation):
        self.table = table
        self.operation = operation
        super().__init__(f"{operation.value} on {table} violates row policy")


class RowPolicy:
    def __init__(
        self,
        table: str,
        select: Iterable[Predicate] = (),
        insert: Iterable[Predicate] = (),
        update: Iterable[Predicate] = (),
        delete: Iterable[Predicate] = (),
    ):
        self.table = table
        self._rules: Dict[Operation, Tuple[Predicate, ...]] = {
            Operation.select: tuple(select),
            Operation.insert: tuple(insert),
            Operation.update: tuple(update),
            Operation.delete: tuple(delete),
        }

    def predicates(self, operation: Operation) -> Tuple[Predicate, ...]:
        return self._rules[operation]

    def allows(self, operation: Operation, row: Any, ctx: AccessContext) -> bool:
        return any(p.matches(row, ctx) for p in self._rules[operation])

    def clause(self, operation: Operation, model: Any, ctx: AccessContext) -> ColumnElement:
        predicates = self._rules[operation]
        if not predicates:
            return false()
        return or_(*(p.clause(model, ctx) for p in predicates))

    def check(self, operation: Operation, row: Any, ctx: AccessContext) -> None:
        """Raise PolicyViolation unless the row passes the write check"""
        if not self.allows(operation, row, ctx):
            raise PolicyViolation(self.table, operation)

    def __repr__(self) -> str:
        return f"RowPolicy({self.table!r})"
