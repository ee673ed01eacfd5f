"""
Tenant-Scoped Resource Use Cases

Generic CRUD over the tables listed in RESOURCES. Every call builds the
caller's access context and goes through the policy-enforced repository.

Error semantics:
- A row the caller may not read, update or delete is RESOURCE_NOT_FOUND
- A write whose resulting row fails the policy check is ACCESS_DENIED
"""

import logging
from typing import Any, Dict, Optional
from uuid import UUID

from pydantic import ValidationError

from libs.result import Error, Result, Return
from dinner_guard.app.policies import PolicyViolation, Principal
from dinner_guard.app.services.membership_resolver import MembershipResolver
from dinner_guard.app.services.unit_of_work import UnitOfWork

from .definitions import ResourceDefinition, resource_for
from .dtos import DeleteResourceResponse, ResourceListResponse, ResourceResponse

logger = logging.getLogger(__name__)

RESOURCE_NOT_FOUND = Error("RESOURCE_NOT_FOUND", "Resource not found")
ACCESS_DENIED = Error("ACCESS_DENIED", "Access denied")


def _unknown_resource(resource: str) -> Result:
    return Return.err(Error("UNKNOWN_RESOURCE", f"Unknown resource: {resource}"))


def _invalid_payload(exc: ValidationError) -> Result:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    return Return.err(Error("INVALID_PAYLOAD", f"{location}: {first.get('msg')}"))


def serialize_row(row: Any) -> Dict[str, Any]:
    return row.model_dump(mode="json")


class _ResourceUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def _repository(self, definition: ResourceDefinition, principal: Principal):
        ctx = await MembershipResolver.from_uow(self.uow).build_access_context(principal)
        return self.uow.scoped(definition.model, ctx)


class ListResourcesUseCase(_ResourceUseCase):
    async def execute(
        self,
        principal: Principal,
        resource: str,
        limit: int = 100,
        offset: int = 0,
        tenant_id: Optional[UUID] = None,
    ) -> Result[ResourceListResponse]:
        definition = resource_for(resource)
        if definition is None:
            return _unknown_resource(resource)

        async with self.uow:
            repository = await self._repository(definition, principal)
            filters = {"tenant_id": tenant_id} if tenant_id is not None else None
            rows = await repository.list(limit=limit, offset=offset, filters=filters)
            return Return.ok(
                ResourceListResponse(resource=resource, rows=[serialize_row(r) for r in rows])
            )


class GetResourceUseCase(_ResourceUseCase):
    async def execute(
        self, principal: Principal, resource: str, row_id: UUID
    ) -> Result[ResourceResponse]:
        definition = resource_for(resource)
        if definition is None:
            return _unknown_resource(resource)

        async with self.uow:
            repository = await self._repository(definition, principal)
            row = await repository.get(row_id)
            if row is None:
                return Return.err(RESOURCE_NOT_FOUND)
            return Return.ok(ResourceResponse(resource=resource, row=serialize_row(row)))


class CreateResourceUseCase(_ResourceUseCase):
    async def execute(
        self, principal: Principal, resource: str, payload: Dict[str, Any]
    ) -> Result[ResourceResponse]:
        definition = resource_for(resource)
        if definition is None:
            return _unknown_resource(resource)

        try:
            values = definition.create_schema.model_validate(payload).model_dump()
        except ValidationError as exc:
            return _invalid_payload(exc)

        if definition.stamps_author and values.get("user_id") is None:
            values["user_id"] = principal.user_id

        async with self.uow:
            repository = await self._repository(definition, principal)
            try:
                row = await repository.add(definition.model(**values))
            except PolicyViolation as exc:
                logger.warning(f"Denied insert by {principal.user_id or 'anonymous'}: {exc}")
                return Return.err(ACCESS_DENIED)
            await self.uow.commit()
            return Return.ok(ResourceResponse(resource=resource, row=serialize_row(row)))


class UpdateResourceUseCase(_ResourceUseCase):
    async def execute(
        self, principal: Principal, resource: str, row_id: UUID, payload: Dict[str, Any]
    ) -> Result[ResourceResponse]:
        definition = resource_for(resource)
        if definition is None:
            return _unknown_resource(resource)

        changes: Dict[str, Any] = {}
        if definition.update_schema is not None:
            try:
                changes = definition.update_schema.model_validate(payload).model_dump(
                    exclude_unset=True
                )
            except ValidationError as exc:
                return _invalid_payload(exc)

        async with self.uow:
            repository = await self._repository(definition, principal)
            try:
                row = await repository.update(row_id, changes)
            except PolicyViolation as exc:
                logger.warning(f"Denied update by {principal.user_id or 'anonymous'}: {exc}")
                return Return.err(ACCESS_DENIED)
            if row is None:
                return Return.err(RESOURCE_NOT_FOUND)
            await self.uow.commit()
            return Return.ok(ResourceResponse(resource=resource, row=serialize_row(row)))


class DeleteResourceUseCase(_ResourceUseCase):
    async def execute(
        self, principal: Principal, resource: str, row_id: UUID
    ) -> Result[DeleteResourceResponse]:
        definition = resource_for(resource)
        if definition is None:
            return _unknown_resource(resource)

        async with self.uow:
            repository = await self._repository(definition, principal)
            if not await repository.delete(row_id):
                return Return.err(RESOURCE_NOT_FOUND)
            await self.uow.commit()
            return Return.ok(DeleteResourceResponse(status="deleted"))
