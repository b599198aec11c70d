import pytest
from typing import AsyncGenerator

from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.database import Base
from app.api.deps import get_db  # Import from where routes actually use it
from app.models import TournamentRecord  # noqa: F401
from app.schemas.tournament import (
    Match,
    MatchResultType,
    MatchStatus,
    Series,
    SeriesStatus,
    Team,
    Tournament,
    TournamentConfig,
    TournamentCreate,
    TeamInput,
    StadiumInput,
)
from app.services.tournament_store import save_tournament
from app.services.tournaments import create_tournament


TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


# Note: Using pytest-asyncio's built-in event_loop fixture (asyncio_mode = auto)


@pytest.fixture(scope="function")
async def test_engine():
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture(scope="function")
async def test_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create test database session."""
    async_session = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )

    async with async_session() as session:
        yield session


@pytest.fixture(scope="function")
async def client(test_session) -> AsyncGenerator[AsyncClient, None]:
    """Create test client with overridden database dependency."""

    async def override_get_db():
        yield test_session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


# --- Helpers ---

def make_tournament(
    team_ids: list[str],
    matches: list[Match] | None = None,
    series: list[Series] | None = None,
    **config,
) -> Tournament:
    """Tournament value with hand-built matches/series."""
    return Tournament(
        id="t-test",
        name="Test Cup",
        created_date="2026-01-01",
        teams=[Team(id=tid, name=f"Team {tid}") for tid in team_ids],
        matches=matches or [],
        series=series or [],
        config=TournamentConfig(**config),
    )


def completed_series(
    series_id: str,
    round_no: int,
    team1_id: str,
    team2_id: str,
    results: list[MatchResultType],
) -> tuple[Series, list[Match]]:
    """A series whose matches all carry the given results."""
    matches = []
    for i, res in enumerate(results, start=1):
        winner = {MatchResultType.T1_WIN: team1_id, MatchResultType.T2_WIN: team2_id}.get(res)
        matches.append(Match(
            id=f"{series_id}-M{i}",
            round=round_no,
            series_id=series_id,
            team1_id=team1_id,
            team2_id=team2_id,
            venue_id="v1",
            match_number=i,
            status=MatchStatus.COMPLETED,
            winner_id=winner,
            result_type=res,
        ))
    series = Series(
        id=series_id,
        round=round_no,
        team1_id=team1_id,
        team2_id=team2_id,
        status=SeriesStatus.COMPLETED,
        match_ids=[m.id for m in matches],
        match_count=len(matches),
    )
    return series, matches


# --- Data Fixtures ---

@pytest.fixture
def sample_create_payload() -> TournamentCreate:
    return TournamentCreate(
        name="Border Trophy",
        season="2026",
        teams=[
            TeamInput(id="ind", name="India", short_code="IND"),
            TeamInput(id="aus", name="Australia", short_code="AUS"),
            TeamInput(id="eng", name="England", short_code="ENG"),
            TeamInput(id="nz", name="New Zealand", short_code="NZ"),
        ],
        stadiums=[
            StadiumInput(id="mcg", name="MCG"),
            StadiumInput(id="lords", name="Lord's"),
        ],
        config=TournamentConfig(series_length="2-3"),
    )


@pytest.fixture
def sample_tournament(sample_create_payload) -> Tournament:
    return create_tournament(sample_create_payload)


@pytest.fixture
async def saved_tournament(test_session, sample_tournament) -> Tournament:
    return await save_tournament(test_session, sample_tournament)


@pytest.fixture
def build_tournament():
    return make_tournament


@pytest.fixture
def build_series():
    return completed_series
