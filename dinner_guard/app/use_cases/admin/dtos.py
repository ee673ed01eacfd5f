from typing import Optional

from pydantic import BaseModel


class TenantStatusResponse(BaseModel):
    tenant_id: str
    status: str
    previous_status: str


class TenantPlanResponse(BaseModel):
    tenant_id: str
    plan: str
    previous_plan: str


class ProfileRoleResponse(BaseModel):
    user_id: str
    role: str
    previous_role: Optional[str] = None
