"""End-to-end tests for the app started with the database-backed store."""

import pytest
from httpx import ASGITransport, AsyncClient

from app.config import Settings
from app.infrastructure.database.repositories import SQLAlchemyTimeRecordRepository
from app.main import create_app

COOKIE = "timer_session"


@pytest.mark.asyncio
async def test_database_store_creates_tables_and_round_trips(tmp_path):
    settings = Settings(
        time_record_store="database",
        database_url=f"sqlite:///{tmp_path}/time_records.db",
        auth_backend="local",
        session_cookie_name=COOKIE,
    )
    app = create_app(settings)

    assert isinstance(app.state.time_record_repository, SQLAlchemyTimeRecordRepository)
    assert app.state.db_engine is not None

    async with app.router.lifespan_context(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            saved = await client.post(
                "/api/v1/time-records",
                json={"description": "Client meeting", "duration_in_seconds": 125},
            )
            token = saved.cookies.get(COOKIE)

        async with AsyncClient(
            transport=transport, base_url="http://test", cookies={COOKIE: token}
        ) as client:
            listed = await client.get("/api/v1/time-records")
            health = await client.get("/api/v1/health")

    assert saved.status_code == 201
    assert listed.status_code == 200
    [record] = listed.json()["data"]
    assert record["id"] == saved.json()["data"]["id"]
    assert record["duration_in_seconds"] == 125
    assert record["duration_display"] == "00:02:05"
    assert health.json()["time_record_store"] == "database"
    assert (tmp_path / "time_records.db").exists()
