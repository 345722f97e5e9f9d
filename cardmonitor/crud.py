"""Database query helpers."""

from __future__ import annotations

import logging
from typing import Optional

from sqlmodel import Session, select
from sqlmodel.sql.expression import Select

from . import models, schemas

logger = logging.getLogger(__name__)


def card_status_statement(since: Optional[int] = None) -> Select:
    """Select every card joined with its active status row, ordered by name."""
    card = models.Card
    sector_map = models.ConsolidatedSectorMap
    statement = (
        select(
            card.id,
            card.name,
            card.size,
            sector_map.status,
            sector_map.rate,
            (sector_map.cur_round_num + sector_map.round_num_offset).label("cur_round_num"),
            sector_map.num_bad_sectors,
            sector_map.consolidated_sector_map.label("data"),
            sector_map.last_updated,
        )
        .join(sector_map, sector_map.id == card.id)
        .where(sector_map.is_active == True)  # noqa: E712
    )
    if since is not None:
        statement = statement.where(sector_map.last_updated >= since)
    return statement.order_by(card.name)


def list_card_statuses(session: Session, *, since: Optional[int] = None) -> list[schemas.CardStatus]:
    rows = session.exec(card_status_statement(since)).all()
    logger.debug("Fetched %s card status rows (since=%s)", len(rows), since)
    return [schemas.CardStatus.model_validate(dict(row._mapping)) for row in rows]
