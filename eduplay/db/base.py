"""SQLAlchemy declarative base shared by all models."""
from sqlalchemy.orm import declarative_base

Base = declarative_base()

# Largest value an SQLite INTEGER column can hold
SQLITE_MAX_INTEGER = 2**63 - 1
