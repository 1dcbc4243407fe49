"""Tests for the get_repositories() DI factory."""

from unittest.mock import AsyncMock

from src.infrastructure.persistence.repositories import (
    Repositories,
    SqlVillaNumberRepository,
    SqlVillaRepository,
    get_repositories,
)


def _repos():
    return get_repositories(AsyncMock())


def test_get_repositories_returns_repositories_instance():
    assert isinstance(_repos(), Repositories)


def test_repositories_villas_is_correct_type():
    assert isinstance(_repos().villas, SqlVillaRepository)


def test_repositories_villa_numbers_is_correct_type():
    assert isinstance(_repos().villa_numbers, SqlVillaNumberRepository)


def test_repositories_share_one_session():
    session = AsyncMock()
    repos = get_repositories(session)
    assert repos.villas._session is repos.villa_numbers._session is session


def test_repositories_dataclass_has_two_fields():
    assert len(Repositories.__dataclass_fields__) == 2
