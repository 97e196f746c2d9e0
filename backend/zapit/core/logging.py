import logging

_FORMAT = "%(asctime)s %(levelname)-5s %(message)s"

_configured = False


def setup_logging(level: str = "INFO") -> None:
    """Install a compact console handler on the root logger (once)."""
    global _configured
    if _configured:
        logging.getLogger().setLevel(level.upper())
        return
    logging.basicConfig(level=level.upper(), format=_FORMAT)
    _configured = True
