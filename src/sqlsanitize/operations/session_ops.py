"""Clear stored login sessions."""

from ..models.messages import ConfirmationMessages
from ..models.options import OperationOptions
from ..utils.logging_utils import get_logger
from .base import BaseSanitizer

logger = get_logger(__name__)

SESSIONS_TABLE = "sessions"


class SessionSanitizer(BaseSanitizer):
    """Empties the sessions table so no login session survives the copy."""

    def messages(
        self, messages: ConfirmationMessages, options: OperationOptions
    ) -> None:
        with self.database_factory(options) as db:
            if db.has_table(SESSIONS_TABLE):
                messages.append("Truncate sessions table.")

    def sanitize(self, options: OperationOptions) -> None:
        with self.database_factory(options) as db:
            if not db.has_table(SESSIONS_TABLE):
                logger.info("No sessions table, nothing to truncate")
                return
            count = db.execute(f"DELETE FROM {{{SESSIONS_TABLE}}}")
            logger.info(f"Deleted {count} session(s)")
