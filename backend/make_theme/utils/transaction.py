import logging
from contextlib import contextmanager
from make_theme.extensions import db

logger = logging.getLogger(__name__)


@contextmanager
def transactional(action=None):
    """
    Yield the session; commit when the block succeeds, otherwise roll
    back and re-raise.
    """
    session = db.session
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        logger.warning("Rolled back %s", action or "transaction")
        raise
