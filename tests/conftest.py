from datetime import date, datetime, time

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from habitgrid import schemas
from habitgrid.database import init_db, make_engine
from habitgrid.main import create_app
from habitgrid.services.tracker import HabitTracker, RecordProbe


class FakeClock:
    """Clock whose current time the tests move by hand."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def set_day(self, day: date, at: time = time(9, 0, 0)) -> None:
        self.now = datetime.combine(day, at)


@pytest.fixture
def engine():
    engine = make_engine("sqlite://", poolclass=StaticPool)
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def clock():
    return FakeClock(datetime(2025, 1, 5, 9, 0, 0))


@pytest.fixture
def tracker(session_factory, clock):
    return HabitTracker(session_factory, RecordProbe(session_factory), clock=clock)


@pytest.fixture
def client(engine, session_factory, clock):
    app = create_app(engine=engine, session_factory=session_factory, clock=clock)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_habit(tracker):
    def _make(description="Read", cadence="daily", schedule=None, start_date=date(2025, 1, 1), color="#40c463"):
        return tracker.create_habit(description, cadence, schedule or schemas.Schedule(), start_date, color)

    return _make
