"""Sanitize email addresses and passwords in the user table."""

import re
from typing import Any

from ..models.messages import ConfirmationMessages
from ..models.options import OperationOptions
from ..utils.logging_utils import get_logger
from ..utils.password_utils import hash_password
from .base import BaseSanitizer

logger = get_logger(__name__)

MAIL_FIELD = "mail"
PASS_FIELD = "pass"

_EMAIL_PLACEHOLDER = re.compile(r"%(uid|mail|name)")


def expand_email_pattern(pattern: str, user: dict[str, Any]) -> str:
    """Build a sanitized address for one user.

    %uid becomes the user id, %mail the current address with "@" replaced by
    "_", and %name the user name with spaces replaced by "_".

    Args:
        pattern: Email pattern, e.g. "user+%uid@localhost.localdomain"
        user: Row with uid, mail and name keys

    Returns:
        str: Expanded email address
    """
    values = {
        "uid": str(user.get("uid", "")),
        "mail": str(user.get("mail") or "").replace("@", "_"),
        "name": str(user.get("name") or "").replace(" ", "_"),
    }
    return _EMAIL_PLACEHOLDER.sub(lambda match: values[match.group(1)], pattern)


class UserTableSanitizer(BaseSanitizer):
    """Resets passwords and rewrites email addresses of every real user.

    The anonymous account (uid 0) is left alone. Whitelisting "mail" or
    "pass" exempts that column.
    """

    def _sanitize_passwords(self, options: OperationOptions) -> bool:
        return options.sanitize_passwords and not options.is_whitelisted(PASS_FIELD)

    def _sanitize_emails(self, options: OperationOptions) -> bool:
        return options.sanitize_emails and not options.is_whitelisted(MAIL_FIELD)

    def messages(
        self, messages: ConfirmationMessages, options: OperationOptions
    ) -> None:
        reset_passwords = self._sanitize_passwords(options)
        rewrite_emails = self._sanitize_emails(options)
        if not reset_passwords and not rewrite_emails:
            return

        with self.database_factory(options) as db:
            if not db.has_table(db.config.user_table):
                return
        if reset_passwords:
            messages.append("Sanitize user passwords.")
        if rewrite_emails:
            messages.append("Sanitize user emails.")

    def sanitize(self, options: OperationOptions) -> None:
        reset_passwords = self._sanitize_passwords(options)
        rewrite_emails = self._sanitize_emails(options)
        if not reset_passwords and not rewrite_emails:
            return

        with self.database_factory(options) as db:
            if not db.has_table(db.config.user_table):
                logger.info(f"No {db.config.user_table} table, nothing to sanitize")
                return
            table = "{" + db.config.user_table + "}"
            with db.transaction() as conn:
                if reset_passwords:
                    count = db.execute(
                        f"UPDATE {table} SET pass = :pass WHERE uid > 0",
                        {"pass": hash_password(options.sanitize_password)},
                        conn=conn,
                    )
                    logger.info(f"Reset passwords for {count} user(s)")

                if rewrite_emails and not options.email_is_pattern:
                    count = db.execute(
                        f"UPDATE {table} SET mail = :mail WHERE uid > 0",
                        {"mail": options.sanitize_email},
                        conn=conn,
                    )
                    logger.info(f"Rewrote email addresses for {count} user(s)")
                elif rewrite_emails:
                    users = db.fetch_all(
                        f"SELECT uid, name, mail FROM {table} WHERE uid > 0",
                        conn=conn,
                    )
                    updates = [
                        {
                            "uid": user["uid"],
                            "mail": expand_email_pattern(options.sanitize_email, user),
                        }
                        for user in users
                    ]
                    if updates:
                        db.execute(
                            f"UPDATE {table} SET mail = :mail WHERE uid = :uid",
                            updates,
                            conn=conn,
                        )
                    logger.info(f"Rewrote email addresses for {len(updates)} user(s)")
