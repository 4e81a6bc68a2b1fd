from __future__ import annotations

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from invoicedash.core.security import hash_password
from invoicedash.models import Base, Customer, User

TEST_PASSWORD = "123456"


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def customer(session) -> Customer:
    customer = Customer(name="Evil Rabbit", email="evil@rabbit.com", image_url="/customers/evil-rabbit.png")
    session.add(customer)
    session.commit()
    session.refresh(customer)
    return customer


@pytest.fixture
def user(session) -> User:
    user = User(name="User", email="user@nextmail.com", password=hash_password(TEST_PASSWORD, iterations=1000))
    session.add(user)
    session.commit()
    session.refresh(user)
    return user
