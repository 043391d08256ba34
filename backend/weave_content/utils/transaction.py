import logging
from contextlib import contextmanager
from weave_content.extensions import db

logger = logging.getLogger(__name__)


@contextmanager
def transactional(label: str | None = None):
    """
    Unit of work around the Flask-SQLAlchemy session.
    Commits when the block completes; any error rolls back and propagates.
    """
    session = db.session
    try:
        yield session
        session.commit()
    except Exception as exc:
        session.rollback()
        logger.info("Rolled back %s: %s", label or "transaction", exc)
        raise
