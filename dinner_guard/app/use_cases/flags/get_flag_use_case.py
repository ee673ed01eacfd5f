from libs.result import Error, Result, Return
from dinner_guard.app.services.unit_of_work import UnitOfWork

from .dtos import FlagListResponse, FlagResponse


class GetFlagUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, name: str) -> Result[FlagResponse]:
        async with self.uow:
            flag = await self.uow.flags.get_by_name(name)
            if flag is None:
                return Return.err(Error("FLAG_NOT_FOUND", f"Flag {name} not found"))
            return Return.ok(FlagResponse.from_entity(flag))


class ListFlagsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[FlagListResponse]:
        async with self.uow:
            flags = await self.uow.flags.list_all()
            return Return.ok(FlagListResponse(flags=[FlagResponse.from_entity(f) for f in flags]))
