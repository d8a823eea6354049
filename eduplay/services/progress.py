"""Per-user progress: atomic save, history and aggregate stats."""
import logging

from sqlalchemy import Integer, cast, distinct, select
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.sql import func

from eduplay.core.errors import NotFoundError
from eduplay.db.gateway import Database
from eduplay.models import Game, Progress, User
from eduplay.schemas.progress import PlatformStatsOutSchema, UserStatsOutSchema

logger = logging.getLogger("eduplay.services.progress")


def build_progress_upsert(user_id: int, game_id: int, score: int, completed: bool):
    """One statement for the whole read-modify-write.

    New pair: score = max_score = score, attempts = 1.
    Existing pair: latest score, max_score never drops, attempts + 1,
    completed stays true once set.
    """
    stmt = sqlite_insert(Progress).values(
        user_id=user_id,
        game_id=game_id,
        score=score,
        max_score=score,
        attempts=1,
        completed=completed,
    )
    return stmt.on_conflict_do_update(
        index_elements=[Progress.user_id, Progress.game_id],
        set_={
            "score": stmt.excluded.score,
            "max_score": func.max(Progress.max_score, stmt.excluded.max_score),
            "attempts": Progress.attempts + 1,
            "completed": func.max(Progress.completed, stmt.excluded.completed),
            "last_played": func.current_timestamp(),
        },
    )


class ProgressService:
    def __init__(self, db: Database):
        self.db = db

    async def save_progress(self, user_id: int, game_id: int, score: int, completed: bool) -> dict:
        async with self.db.transaction() as conn:
            if await conn.fetch_one(select(Game.id).where(Game.id == game_id)) is None:
                raise NotFoundError("Game not found")
            await conn.execute(build_progress_upsert(user_id, game_id, score, completed))
            row = await conn.fetch_one(
                select(Progress.__table__).where(
                    Progress.user_id == user_id, Progress.game_id == game_id
                )
            )
        logger.info(
            "Progress saved user=%s game=%s score=%s attempts=%s",
            user_id, game_id, score, row["attempts"],
        )
        return row

    async def get_progress(self, user_id: int, game_id: int) -> dict | None:
        return await self.db.fetch_one(
            select(Progress.__table__).where(Progress.user_id == user_id, Progress.game_id == game_id)
        )

    async def list_for_user(self, user_id: int) -> list[dict]:
        """Progress rows with game title, icon and category, most recently played first."""
        query = (
            select(Progress.__table__, Game.title, Game.icon, Game.category)
            .select_from(Progress.__table__.join(Game.__table__, Progress.game_id == Game.id))
            .where(Progress.user_id == user_id)
            .order_by(Progress.last_played.desc(), Progress.id.desc())
        )
        return await self.db.fetch_all(query)

    async def list_for_game(self, game_id: int) -> list[dict]:
        return await self.db.fetch_all(
            select(Progress.__table__).where(Progress.game_id == game_id).order_by(Progress.id)
        )

    async def user_stats(self, user_id: int) -> UserStatsOutSchema:
        row = await self.db.fetch_one(
            select(
                func.count(distinct(Progress.game_id)).label("games_played"),
                func.coalesce(func.sum(Progress.attempts), 0).label("total_attempts"),
                func.coalesce(func.sum(cast(Progress.completed, Integer)), 0).label("games_completed"),
                func.coalesce(func.avg(Progress.max_score), 0).label("avg_score"),
                func.coalesce(func.max(Progress.max_score), 0).label("best_score"),
                func.max(Progress.last_played).label("last_played"),
            ).where(Progress.user_id == user_id)
        )
        stats = UserStatsOutSchema(**row)
        stats.avg_score = round(stats.avg_score, 2)
        return stats

    async def platform_stats(self) -> PlatformStatsOutSchema:
        row = await self.db.fetch_one(
            select(
                select(func.count(User.id)).scalar_subquery().label("users"),
                select(func.count(Game.id)).scalar_subquery().label("games"),
                select(func.count(Progress.id)).scalar_subquery().label("plays"),
                select(func.count(Progress.id))
                .where(Progress.completed == True)  # noqa: E712
                .scalar_subquery()
                .label("completed"),
            )
        )
        return PlatformStatsOutSchema(**row)
