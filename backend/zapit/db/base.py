from sqlalchemy.engine import Engine
from zapit.models.base import Base


def _import_models() -> None:
    """Import all models so their metadata is registered on Base."""
    import zapit.models.link  # noqa: F401


def create_all(engine: Engine) -> None:
    """Create missing tables and indexes (no-op when the schema exists)."""
    _import_models()
    Base.metadata.create_all(bind=engine)
