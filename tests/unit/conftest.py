import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    uow.flag_cache = None
    # Empty membership state unless a test says otherwise
    uow.memberships.get_active_by_user_id = AsyncMock(return_value=[])
    uow.memberships.get_by_user_and_tenant = AsyncMock(return_value=None)
    uow.profiles.get_by_id = AsyncMock(return_value=None)
    return uow


@pytest.fixture
def scoped_repo(mock_uow):
    """Policy-enforced repository returned by uow.scoped(...)"""
    repo = MagicMock()
    repo.list = AsyncMock(return_value=[])
    repo.get = AsyncMock(return_value=None)
    repo.add = AsyncMock(side_effect=lambda row: row)
    repo.update = AsyncMock(return_value=None)
    repo.delete = AsyncMock(return_value=False)
    mock_uow.scoped = MagicMock(return_value=repo)
    return repo
