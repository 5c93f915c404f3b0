import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for payloads exchanged with fight clients, which speak camelCase JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Fighter(CamelModel):
    name: str = Field(min_length=1)
    level: int
    picture: str | None = None
    powers: str | None = None


class Hero(Fighter):
    pass


class Villain(Fighter):
    pass


class Fighters(CamelModel):
    """A hero and a villain selected to fight each other."""

    hero: Hero
    villain: Villain


class Fight(CamelModel):
    id: int | None = None
    """Assigned by the fight service once the fight is created"""
    fight_date: datetime.datetime | None = None
    winner_name: str | None = None
    winner_level: int | None = None
    winner_picture: str | None = None
    winner_team: str | None = None
    loser_name: str | None = None
    loser_level: int | None = None
    loser_picture: str | None = None
    loser_team: str | None = None
