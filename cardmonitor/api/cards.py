"""Card status endpoint."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlmodel import Session

from .. import crud, schemas
from ..database import get_session

router = APIRouter()

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")
DATA_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE"]


async def read_since(request: Request) -> Optional[int]:
    """Resolve ``since`` from the query string, falling back to a form body."""
    raw = request.query_params.get("since")
    if raw is None and request.headers.get("content-type", "").lower().startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        raw = form.get("since")
    if raw is None:
        return None
    try:
        return int(raw)
    except (TypeError, ValueError) as exc:
        raise HTTPException(status_code=422, detail="since must be an integer timestamp") from exc


@router.api_route(
    "/data",
    methods=DATA_METHODS,
    response_model=list[schemas.CardStatus],
    responses={500: {"model": schemas.ErrorResponse}},
)
def list_card_statuses(
    session: Session = Depends(get_session),
    since: Optional[int] = Depends(read_since),
) -> list[schemas.CardStatus]:
    return crud.list_card_statuses(session, since=since)
