from typing import Any, Dict, List

from pydantic import BaseModel


class ResourceResponse(BaseModel):
    resource: str
    row: Dict[str, Any]


class ResourceListResponse(BaseModel):
    resource: str
    rows: List[Dict[str, Any]]


class DeleteResourceResponse(BaseModel):
    status: str
