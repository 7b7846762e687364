from pydantic import BaseModel


class GameDiscovery(BaseModel):
    game_id: str
    path: str | None = None
