from .flag_audit_recorder import (
    clear_audit_context,
    install,
    pop_changed_flags,
    record_flag_changes,
    set_audit_context,
)

__all__ = [
    "clear_audit_context",
    "install",
    "pop_changed_flags",
    "record_flag_changes",
    "set_audit_context",
]
