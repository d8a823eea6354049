"""Demo rows inserted on first start: a few accounts and the initial game catalogue."""
import logging

from sqlalchemy import select
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.sql import func
from starlette.concurrency import run_in_threadpool

from eduplay.core.security import hash_password
from eduplay.db.gateway import Database
from eduplay.models import Game, User

logger = logging.getLogger("eduplay.services.seeding")

# (username, email, role); all share the configured demo password
DEMO_USERS = [
    ("user1", "user1@example.com", "user"),
    ("demo", "demo@example.com", "user"),
    ("test", "test@example.com", "user"),
    ("admin", "admin@example.com", "admin"),
]

DEMO_GAMES = [
    {
        "title": "Mathematical game",
        "description": "Time-limited arithmetic problems",
        "icon": "+",
        "category": "maths",
        "difficulty": "low",
        "path": "/games/math-quiz/",
        "color": "#3498db",
        "status": "active",
    },
    {
        "title": "Memory training",
        "description": "Find the matching pairs",
        "icon": "*",
        "category": "memory",
        "difficulty": "mid-low",
        "path": "/games/memory/",
        "color": "#9b59b6",
        "status": "in-development",
    },
]


async def _count(db: Database, model) -> int:
    row = await db.fetch_one(select(func.count(model.id).label("count")))
    return row["count"]


async def seed_demo_data(db: Database, demo_password: str) -> dict:
    """Fill empty tables with demo rows.

    Each table is only touched while it is empty. Rows go in with
    ON CONFLICT DO NOTHING, so two processes starting at once against the same
    file cannot insert duplicates (username, email and game path are unique).
    """
    seeded = {"users": 0, "games": 0}

    if await _count(db, User) == 0:
        password_hash = await run_in_threadpool(hash_password, demo_password)
        rows = [
            {"username": u, "email": e, "role": r, "password_hash": password_hash}
            for (u, e, r) in DEMO_USERS
        ]
        result = await db.execute(sqlite_insert(User).values(rows).on_conflict_do_nothing())
        seeded["users"] = result.rows_affected
        logger.info("Added %s demo users", seeded["users"])

    if await _count(db, Game) == 0:
        result = await db.execute(sqlite_insert(Game).values(DEMO_GAMES).on_conflict_do_nothing())
        seeded["games"] = result.rows_affected
        logger.info("Added %s demo games", seeded["games"])

    return seeded
