from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from dinner_guard.domain.entities import Environment, FeatureFlag


class FlagSnapshot(BaseModel):
    """Immutable copy of the fields flag evaluation reads"""

    name: str
    enabled: bool
    rollout_percentage: int
    target_environment: Environment
    target_users: List[str] = []
    expires_at: Optional[datetime] = None

    model_config = {"frozen": True}

    @classmethod
    def from_flag(cls, flag: FeatureFlag) -> "FlagSnapshot":
        return cls(
            name=flag.name,
            enabled=flag.enabled,
            rollout_percentage=flag.rollout_percentage,
            target_environment=flag.target_environment,
            target_users=list(flag.target_users or []),
            expires_at=flag.expires_at,
        )
