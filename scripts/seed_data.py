"""Seed a demo login and a few customers into the configured database."""

import logging

from sqlalchemy import select

from invoicedash.core.config import get_config
from invoicedash.core.logging_config import configure_logging
from invoicedash.core.security import hash_password
from invoicedash.database.db import get_db_session, init_db
from invoicedash.models import Customer, User

logger = logging.getLogger("scripts.seed_data")

DEMO_USER = {"name": "User", "email": "user@nextmail.com", "password": "123456"}

DEMO_CUSTOMERS = [
    {"name": "Evil Rabbit", "email": "evil@rabbit.com", "image_url": "/customers/evil-rabbit.png"},
    {"name": "Delba de Oliveira", "email": "delba@oliveira.com", "image_url": "/customers/delba-de-oliveira.png"},
    {"name": "Lee Robinson", "email": "lee@robinson.com", "image_url": "/customers/lee-robinson.png"},
]


def seed() -> None:
    config = get_config()
    init_db()
    with get_db_session() as db:
        try:
            existing = db.scalars(select(User).where(User.email == DEMO_USER["email"])).first()
            if existing is None:
                db.add(
                    User(
                        name=DEMO_USER["name"],
                        email=DEMO_USER["email"],
                        password=hash_password(DEMO_USER["password"], iterations=config.PASSWORD_HASH_ITERATIONS),
                    )
                )
            known = set(db.scalars(select(Customer.email)))
            for customer in DEMO_CUSTOMERS:
                if customer["email"] not in known:
                    db.add(Customer(**customer))
            db.commit()
        except Exception:
            db.rollback()
            raise
    logger.info("seed.completed", extra={"event": "seed.completed"})


if __name__ == "__main__":
    configure_logging()
    seed()
