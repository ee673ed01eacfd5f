"""
Flag Audit Recorder

SQLAlchemy before_flush hook that writes one FlagAuditEntry for every
FeatureFlag inserted, updated or deleted in the flush. The entry joins the
same flush, so the mutation and its audit row commit or roll back together.
An exception raised here aborts the flush and with it the mutation.
"""

import logging
from typing import Any, Dict, Optional, Set
from uuid import UUID

from pydantic_core import to_jsonable_python
from sqlalchemy import event, inspect
from sqlalchemy.orm import Session

from dinner_guard.domain.base import utcnow
from dinner_guard.domain.entities import FeatureFlag, FlagAuditAction, FlagAuditEntry

logger = logging.getLogger(__name__)

ACTOR_KEY = "flag_audit_actor"
REASON_KEY = "flag_audit_reason"
CHANGED_FLAGS_KEY = "flag_audit_changed"


def set_audit_context(session: Any, actor_id: Optional[UUID], reason: Optional[str] = None) -> None:
    """Record who is changing flags in this session, and why"""
    session.info[ACTOR_KEY] = actor_id
    session.info[REASON_KEY] = reason


def clear_audit_context(session: Any) -> None:
    session.info.pop(ACTOR_KEY, None)
    session.info.pop(REASON_KEY, None)


def pop_changed_flags(session: Any) -> Set[str]:
    """Names of flags written since the last call; drained on read"""
    return session.info.pop(CHANGED_FLAGS_KEY, set())


def _column_keys():
    return [attr.key for attr in inspect(FeatureFlag).column_attrs]


def snapshot_current(flag: FeatureFlag) -> Dict[str, Any]:
    return to_jsonable_python({key: getattr(flag, key) for key in _column_keys()})


def snapshot_previous(flag: FeatureFlag) -> Dict[str, Any]:
    """Values as last loaded from the database, before pending changes"""
    state = inspect(flag)
    values = {}
    for key in _column_keys():
        history = state.attrs[key].history
        if history.deleted:
            values[key] = history.deleted[0]
        elif history.unchanged:
            values[key] = history.unchanged[0]
        else:
            values[key] = None
    return to_jsonable_python(values)


def _entry(
    session: Session,
    flag: FeatureFlag,
    action: FlagAuditAction,
    old_values: Optional[Dict[str, Any]],
    new_values: Optional[Dict[str, Any]],
) -> FlagAuditEntry:
    actor = session.info.get(ACTOR_KEY) or flag.updated_by or flag.created_by
    return FlagAuditEntry(
        flag_id=flag.id,
        flag_name=flag.name,
        action=action,
        old_values=old_values,
        new_values=new_values,
        changed_by=actor,
        changed_at=utcnow(),
        reason=session.info.get(REASON_KEY),
    )


def record_flag_changes(session: Session, flush_context: Any, instances: Any) -> None:
    entries = []
    changed = set()

    for obj in list(session.new):
        if isinstance(obj, FeatureFlag):
            entries.append(
                _entry(session, obj, FlagAuditAction.created, None, snapshot_current(obj))
            )
            changed.add(obj.name)

    for obj in list(session.dirty):
        if isinstance(obj, FeatureFlag) and session.is_modified(obj):
            old_values = snapshot_previous(obj)
            obj.updated_at = utcnow()
            entries.append(
                _entry(session, obj, FlagAuditAction.updated, old_values, snapshot_current(obj))
            )
            changed.update({obj.name, old_values.get("name")} - {None})

    for obj in list(session.deleted):
        if isinstance(obj, FeatureFlag):
            entries.append(
                _entry(session, obj, FlagAuditAction.deleted, snapshot_previous(obj), None)
            )
            changed.add(obj.name)

    if not entries:
        return

    session.add_all(entries)
    session.info.setdefault(CHANGED_FLAGS_KEY, set()).update(changed)
    logger.info(
        "Recorded flag audit entries: "
        + ", ".join(f"{e.action.value} {e.flag_name}" for e in entries)
    )


def install() -> None:
    """Attach the recorder to every ORM session, async sessions included"""
    if not event.contains(Session, "before_flush", record_flag_changes):
        event.listen(Session, "before_flush", record_flag_changes)
