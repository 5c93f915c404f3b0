from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import PlainTextResponse
from loguru import logger

from app.schemas.fight import Fight, Fighters
from app.services.fight import FightService, get_fight_service

router = APIRouter(prefix="/fights", tags=["fights"])


# Static paths are registered before "/{fight_id}" so they are not matched as ids
@router.get("/randomfighters", summary="Returns two random fighters")
async def get_random_fighters(
    service: Annotated[FightService, Depends(get_fight_service)],
) -> Fighters:
    fighters = await service.get_random_fighters()
    logger.debug(f"Get random fighters {fighters}")
    return fighters


@router.get(
    "/ping",
    summary="Pings the Fight REST Endpoint",
    response_class=PlainTextResponse,
)
async def ping() -> str:
    logger.debug("Invoking Ping")
    return "ping fights"


@router.get("", summary="Returns all the fights from the database")
async def get_all_fights(
    service: Annotated[FightService, Depends(get_fight_service)],
) -> list[Fight]:
    fights = await service.get_all_fights()
    logger.debug(f"Total number of fights {len(fights)}")
    return fights


@router.get(
    "/{fight_id}",
    summary="Returns a fight for a given identifier",
    response_model=Fight,
    responses={
        status.HTTP_204_NO_CONTENT: {
            "description": "The fight is not found for a given identifier"
        }
    },
)
async def get_fight(
    fight_id: int, service: Annotated[FightService, Depends(get_fight_service)]
) -> Fight | Response:
    fight = await service.find_fight_by_id(fight_id)
    if fight is None:
        logger.debug(f"No fight found with id {fight_id}")
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    logger.debug(f"Found fight {fight}")
    return fight


@router.post(
    "",
    summary="Creates a fight between two fighters",
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
    responses={
        status.HTTP_201_CREATED: {
            "description": "The URI of the created fight is returned in the Location header"
        }
    },
)
async def create_fight(
    fighters: Fighters,
    request: Request,
    service: Annotated[FightService, Depends(get_fight_service)],
) -> Response:
    fight = await service.create_fight(fighters)
    if fight.id is None:
        msg = "Fight service returned a fight without an identifier"
        raise ValueError(msg)

    base_url = str(request.url.replace(query="")).rstrip("/")
    location = f"{base_url}/{fight.id}"
    logger.debug(f"New fight created with URI {location}")
    return Response(status_code=status.HTTP_201_CREATED, headers={"Location": location})
