from fastapi import Request

from zapit.core.config import Settings
from zapit.db.session import Database


def get_database(request: Request) -> Database:
    """
    Usage in routes:
        def endpoint(db: Database = Depends(get_database)):
            ...
    """
    return request.app.state.database


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
