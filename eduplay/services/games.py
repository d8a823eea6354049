"""Game catalogue: public reads and admin CRUD."""
import logging

from sqlalchemy import delete, insert, select, update

from eduplay.core.errors import ConflictError, ConstraintViolation, NotFoundError
from eduplay.db.gateway import Database
from eduplay.models import Game, Progress

logger = logging.getLogger("eduplay.services.games")

# Served when the catalogue is empty so the front end always has a tile to show.
DEMO_GAME = {
    "id": 1,
    "title": "demo 1",
    "description": "demo-1",
    "icon": "D",
    "category": "demo",
    "difficulty": "none",
    "path": "none",
    "color": "#3498db",
    "status": "active",
}


class GameService:
    def __init__(self, db: Database):
        self.db = db

    async def list_games(self) -> list[dict]:
        return await self.db.fetch_all(select(Game.__table__).order_by(Game.id))

    async def list_catalogue(self) -> list[dict]:
        """Public listing: falls back to a single demo row when nothing is stored."""
        games = await self.list_games()
        return games or [dict(DEMO_GAME)]

    async def get_game(self, game_id: int) -> dict:
        game = await self.db.fetch_one(select(Game.__table__).where(Game.id == game_id))
        if game is None:
            raise NotFoundError("Game not found")
        return game

    async def create_game(self, fields: dict) -> int:
        try:
            result = await self.db.execute(insert(Game).values(**fields))
        except ConstraintViolation as exc:
            raise ConflictError("A game with this path already exists") from exc
        logger.info("Created game %r (id=%s)", fields.get("title"), result.inserted_id)
        return result.inserted_id

    async def update_game(self, game_id: int, fields: dict) -> None:
        """Apply only the provided fields; None means keep the stored value."""
        changes = {key: value for key, value in fields.items() if value is not None}
        try:
            async with self.db.transaction() as conn:
                if await conn.fetch_one(select(Game.id).where(Game.id == game_id)) is None:
                    raise NotFoundError("Game not found")
                if changes:
                    await conn.execute(update(Game).where(Game.id == game_id).values(**changes))
        except ConstraintViolation as exc:
            raise ConflictError("A game with this path already exists") from exc

    async def delete_game(self, game_id: int) -> None:
        """Delete a game together with every progress row that references it."""
        async with self.db.transaction() as conn:
            if await conn.fetch_one(select(Game.id).where(Game.id == game_id)) is None:
                raise NotFoundError("Game not found")
            removed = await conn.execute(delete(Progress).where(Progress.game_id == game_id))
            await conn.execute(delete(Game).where(Game.id == game_id))
        logger.info("Deleted game id=%s with %s progress rows", game_id, removed.rows_affected)
