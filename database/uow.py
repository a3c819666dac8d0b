import contextlib
import logging

from database.database import SessionLocal
from database.repository import ProfileRepository

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def matchmaking_uow():
    """Per-unit-of-work transaction scope.

    Yields a ProfileRepository bound to a fresh Session. Commits on success,
    rolls back on exception, always closes.

    Usage:
        with matchmaking_uow() as repo:
            profile = repo.get_user_with_details(user_id)
            # score and save matches...
        # commit happens automatically on successful exit
    """
    session = SessionLocal()
    try:
        repo = ProfileRepository(session)
        yield repo
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
