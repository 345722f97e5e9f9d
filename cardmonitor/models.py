"""Database models.

The endurance-test collector owns both tables and keeps them up to date; the
mappings here exist only so queries can be built against them.
"""

from typing import Optional

from sqlalchemy import BigInteger, Column, ForeignKey, LargeBinary
from sqlmodel import Field, SQLModel


class Card(SQLModel, table=True):
    """A card registered by the collector."""

    __tablename__ = "cards"

    id: int = Field(sa_column=Column(BigInteger, primary_key=True, autoincrement=False))
    name: str = Field(max_length=255)
    uuid: Optional[str] = Field(default=None, max_length=36)
    size: int = Field(sa_column=Column(BigInteger, nullable=False))  # sectors
    sector_size: Optional[int] = None


class ConsolidatedSectorMap(SQLModel, table=True):
    """Status snapshot for a card.

    A card may have several historical rows; only the one with ``is_active``
    set is current. ``consolidated_sector_map`` is a packed health map that is
    passed through untouched.
    """

    __tablename__ = "consolidated_sector_maps"

    id: int = Field(sa_column=Column(BigInteger, ForeignKey("cards.id"), primary_key=True, autoincrement=False))
    last_updated: int = Field(sa_column=Column(BigInteger, primary_key=True, autoincrement=False))
    consolidated_sector_map: Optional[bytes] = Field(default=None, sa_column=Column(LargeBinary, nullable=True))
    cur_round_num: int = Field(default=0, sa_column=Column(BigInteger, nullable=False, default=0))
    round_num_offset: int = Field(default=0, sa_column=Column(BigInteger, nullable=False, default=0))
    num_bad_sectors: int = Field(default=0, sa_column=Column(BigInteger, nullable=False, default=0))
    status: int = 0
    rate: float = 0.0
    is_active: bool = Field(default=False, index=True)
