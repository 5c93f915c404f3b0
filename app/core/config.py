from typing import Literal

from dotenv import load_dotenv
from pydantic_settings import BaseSettings


class Config(BaseSettings):
    env: Literal["prod", "dev"] = "prod"

    # Import string of the FightService implementation, e.g. "mypkg.fights:FightService"
    fight_service: str | None = None

    # HTTP
    cors_origins: list[str] = ["*"]
    host: str = "127.0.0.1"
    port: int = 8082

    log_level: str = "INFO"

    @property
    def is_dev(self) -> bool:
        return self.env == "dev"


load_dotenv()
settings = Config()
