"""Tests for the card status query."""

import pytest
from sqlalchemy import create_engine
from sqlmodel import Session

from cardmonitor import crud
from cardmonitor.database import CONNECTION_ERROR_MESSAGE, DatabaseUnavailableError, open_connection


class TestCardStatusStatement:
    """Tests for the generated SELECT."""

    def test_joins_active_rows_ordered_by_name(self):
        sql = str(crud.card_status_statement())
        assert "JOIN consolidated_sector_maps" in sql
        assert "consolidated_sector_maps.is_active" in sql
        assert sql.rstrip().endswith("ORDER BY cards.name")
        assert "last_updated >=" not in sql

    def test_since_is_bound_not_interpolated(self):
        """The timestamp travels as a bind parameter."""
        compiled = crud.card_status_statement(since=1700000000).compile()
        assert "consolidated_sector_maps.last_updated >=" in str(compiled)
        assert "1700000000" not in str(compiled)
        assert 1700000000 in compiled.params.values()

    def test_since_zero_still_filters(self):
        compiled = crud.card_status_statement(since=0).compile()
        assert "last_updated >=" in str(compiled)


class TestListCardStatuses:
    """Tests for row mapping."""

    def test_maps_rows_to_records(self, engine, add_card):
        add_card(5, "card", data=b"\x01\x02", cur_round_num=2, round_num_offset=3, rate=12.5)

        with Session(engine) as session:
            records = crud.list_card_statuses(session)

        assert len(records) == 1
        assert records[0].id == 5
        assert records[0].data == "AQI="
        assert records[0].cur_round_num == 5
        assert records[0].rate == 12.5


class TestOpenConnection:
    """Tests for connection failure handling."""

    def test_unopenable_database_raises(self, tmp_path):
        engine = create_engine(f"sqlite:///{tmp_path / 'no' / 'such' / 'dir.db'}")
        with pytest.raises(DatabaseUnavailableError) as excinfo:
            open_connection(engine)
        assert str(excinfo.value) == CONNECTION_ERROR_MESSAGE
        engine.dispose()

    def test_reachable_database_connects(self, engine):
        connection = open_connection(engine)
        try:
            assert not connection.closed
        finally:
            connection.close()
