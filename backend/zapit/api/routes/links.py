# backend/zapit/api/routes/links.py
from fastapi import APIRouter, Depends, HTTPException, status

from zapit.api.deps import get_database
from zapit.core.errors import DuplicateLink, InternalStoreError, InvalidSubmission
from zapit.db.session import Database
from zapit.schemas.link import LinkCreated, LinkSubmission
from zapit.services.ingest import submit

router = APIRouter()


# POST /add
@router.post("/add", response_model=LinkCreated, status_code=status.HTTP_201_CREATED)
def add_link(payload: LinkSubmission, db: Database = Depends(get_database)):
    try:
        return submit(db, payload)
    except InvalidSubmission as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    except DuplicateLink:
        raise HTTPException(status_code=409, detail="Already zapped!")
    except InternalStoreError:
        raise HTTPException(status_code=500, detail="Error storing link")
