"""Shared fixtures: a Fight API app wired to an in-memory fight service."""

import os

os.environ.pop("FIGHT_SERVICE", None)

import datetime
from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from app.schemas.fight import Fight
from tests.stub_fight_service import StubFightService


@pytest.fixture
def fight() -> Fight:
    return Fight(
        id=42,
        fight_date=datetime.datetime(2024, 2, 1, 20, 30, tzinfo=datetime.UTC),
        winner_name="Luke Skywalker",
        winner_level=20,
        winner_picture="luke.png",
        winner_team="heroes",
        loser_name="Palpatine",
        loser_level=18,
        loser_picture="palpatine.png",
        loser_team="villains",
    )


@pytest.fixture
def fight_service(fight: Fight) -> StubFightService:
    return StubFightService(fights=[fight], next_id=100)


@pytest.fixture
def client(fight_service: StubFightService) -> Iterator[TestClient]:
    with TestClient(create_app(fight_service)) as test_client:
        yield test_client
