"""
Tenant-Scoped Resource Use Cases
"""

from .definitions import RESOURCES, ResourceDefinition, resource_for
from .dtos import DeleteResourceResponse, ResourceListResponse, ResourceResponse
from .resource_use_cases import (
    CreateResourceUseCase,
    DeleteResourceUseCase,
    GetResourceUseCase,
    ListResourcesUseCase,
    UpdateResourceUseCase,
)

__all__ = [
    "RESOURCES",
    "ResourceDefinition",
    "resource_for",
    "ListResourcesUseCase",
    "GetResourceUseCase",
    "CreateResourceUseCase",
    "UpdateResourceUseCase",
    "DeleteResourceUseCase",
    "ResourceResponse",
    "ResourceListResponse",
    "DeleteResourceResponse",
]
