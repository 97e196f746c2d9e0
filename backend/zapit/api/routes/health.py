# backend/zapit/api/routes/health.py
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError

from zapit.api.deps import get_database
from zapit.db.session import Database

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/health")
def health(db: Database = Depends(get_database)):
    try:
        db.ping()
    except SQLAlchemyError:
        logger.exception("[health] database unreachable")
        raise HTTPException(status_code=503, detail="database unreachable")
    return {"ok": True}
