"""Create the schema and optionally seed a few funds."""
from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from .session import Base, get_engine, get_session
from . import models  # noqa: F401  # ensure models are imported for metadata

logger = logging.getLogger(__name__)

SEED_FUNDS = ("Growth Fund", "Income Fund", "Balanced Fund")


def create_all() -> None:
    engine = get_engine()
    Base.metadata.create_all(bind=engine)


def seed_funds(names=SEED_FUNDS) -> int:
    """Insert ``names`` as funds when the funds table is empty. Returns how many were added."""
    with get_session() as session:
        if session.execute(select(models.Fund.id).limit(1)).first() is not None:
            return 0
        session.add_all([models.Fund(name=name) for name in names])
        session.commit()
    logger.info("Seeded %d funds", len(names))
    return len(names)


def init_db(seed: bool = False) -> None:
    create_all()
    if seed:
        seed_funds()


if __name__ == "__main__":
    try:
        init_db(seed=True)
        print("Database tables created successfully.")
    except SQLAlchemyError as exc:
        raise SystemExit(f"Failed to create tables: {exc}") from exc
