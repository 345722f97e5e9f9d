"""Shared fixtures: a throwaway SQLite store standing in for MySQL."""

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel

from cardmonitor.config import get_settings
from cardmonitor.database import get_engine
from cardmonitor.models import Card, ConsolidatedSectorMap


def _reset_caches():
    get_settings.cache_clear()
    get_engine.cache_clear()


@pytest.fixture
def engine(tmp_path, monkeypatch):
    """Point the app at a temporary database with both tables created."""
    db_path = tmp_path / "monitor.db"
    monkeypatch.setenv("CARDMONITOR_DATABASE_URL", f"sqlite:///{db_path}")
    _reset_caches()
    engine = get_engine()
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()
    _reset_caches()


@pytest.fixture
def client(engine):
    from cardmonitor.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def add_card(engine):
    """Insert a card plus one status row for it."""

    def _add(card_id, name, *, last_updated=1000, is_active=True, data=b"\x66\x66", size=4096, **fields):
        with Session(engine) as session:
            if session.get(Card, card_id) is None:
                session.add(Card(id=card_id, name=name, size=size, sector_size=512))
            session.add(
                ConsolidatedSectorMap(
                    id=card_id,
                    last_updated=last_updated,
                    consolidated_sector_map=data,
                    is_active=is_active,
                    cur_round_num=fields.get("cur_round_num", 1),
                    round_num_offset=fields.get("round_num_offset", 0),
                    num_bad_sectors=fields.get("num_bad_sectors", 0),
                    status=fields.get("status", 2),
                    rate=fields.get("rate", 0.0),
                )
            )
            session.commit()

    return _add
