"""
Feature Flag Use Cases

Evaluation (any caller) and administration (operators only).
"""

from .create_flag_use_case import CreateFlagUseCase
from .delete_flag_use_case import DeleteFlagUseCase
from .dtos import (
    CreateFlagCommand,
    DeleteFlagResponse,
    FlagAuditEntryResponse,
    FlagAuditLogResponse,
    FlagEvaluationResponse,
    FlagListResponse,
    FlagResponse,
    UserFlagsResponse,
)
from .evaluate_flag_use_case import EvaluateFlagUseCase
from .get_flag_audit_log_use_case import GetFlagAuditLogUseCase
from .get_flag_use_case import GetFlagUseCase, ListFlagsUseCase
from .get_user_flags_use_case import GetUserFlagsUseCase
from .update_flag_use_case import UPDATABLE_FIELDS, UpdateFlagUseCase

__all__ = [
    "EvaluateFlagUseCase",
    "GetUserFlagsUseCase",
    "CreateFlagUseCase",
    "UpdateFlagUseCase",
    "DeleteFlagUseCase",
    "GetFlagUseCase",
    "ListFlagsUseCase",
    "GetFlagAuditLogUseCase",
    "UPDATABLE_FIELDS",
    "CreateFlagCommand",
    "FlagEvaluationResponse",
    "UserFlagsResponse",
    "FlagResponse",
    "FlagListResponse",
    "DeleteFlagResponse",
    "FlagAuditEntryResponse",
    "FlagAuditLogResponse",
]
