import importlib
from typing import Protocol, runtime_checkable

from fastapi import HTTPException, Request, status
from loguru import logger

from app.schemas.fight import Fight, Fighters


@runtime_checkable
class FightService(Protocol):
    """Collaborator that owns fighter selection, fight resolution and storage."""

    async def get_random_fighters(self) -> Fighters: ...

    async def get_all_fights(self) -> list[Fight]: ...

    async def find_fight_by_id(self, fight_id: int) -> Fight | None: ...

    async def create_fight(self, fighters: Fighters) -> Fight: ...


class FightServiceLoadError(Exception):
    pass


def load_fight_service(import_path: str) -> FightService:
    """
    Load a FightService implementation from an import string.

    Args:
        import_path: A "package.module:attribute" string. If the attribute is a class
            or factory it is called without arguments.

    Returns:
        The service instance.

    Raises:
        FightServiceLoadError: If the string is malformed, the module fails to import,
            the attribute can't be found or called, or the result doesn't implement
            FightService.
    """
    module_name, sep, attr_path = import_path.partition(":")
    if not sep or not module_name or not attr_path:
        msg = f"Invalid fight service import string {import_path!r}, expected 'module:attribute'"
        raise FightServiceLoadError(msg)

    try:
        module = importlib.import_module(module_name)
    except Exception as e:
        msg = f"Could not import fight service module {module_name!r}: {e}"
        raise FightServiceLoadError(msg) from e

    obj = module
    for attr in attr_path.split("."):
        try:
            obj = getattr(obj, attr)
        except AttributeError as e:
            msg = f"Module {module_name!r} has no attribute {attr_path!r}"
            raise FightServiceLoadError(msg) from e

    if callable(obj):
        try:
            service = obj()
        except Exception as e:
            msg = f"Could not create fight service from {import_path!r}: {e}"
            raise FightServiceLoadError(msg) from e
    else:
        service = obj
    if not isinstance(service, FightService):
        msg = f"{import_path!r} does not provide a FightService"
        raise FightServiceLoadError(msg)

    logger.info(f"Loaded fight service from {import_path}")
    return service


def get_fight_service(request: Request) -> FightService:
    service: FightService | None = getattr(request.app.state, "fight_service", None)
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Fight service is not configured",
        )
    return service
