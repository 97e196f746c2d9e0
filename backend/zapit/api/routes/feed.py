# backend/zapit/api/routes/feed.py
from fastapi import APIRouter, Depends, HTTPException, Response

from zapit.api.deps import get_app_settings, get_database
from zapit.core.config import Settings
from zapit.core.errors import InternalStoreError
from zapit.db.session import Database
from zapit.services.feed import RSS_CONTENT_TYPE, render

router = APIRouter()


# GET /feed.xml
@router.get("/feed.xml", response_class=Response)
def feed(
    db: Database = Depends(get_database),
    settings: Settings = Depends(get_app_settings),
):
    try:
        document = render(db, settings.DOMAIN)
    except InternalStoreError:
        raise HTTPException(status_code=500, detail="Error generating feed")
    return Response(content=document.to_xml(), media_type=RSS_CONTENT_TYPE)
