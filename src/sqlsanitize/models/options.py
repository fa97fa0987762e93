"""Operation options shared by every sanitize provider and action."""

import re
from dataclasses import dataclass, field
from typing import Any

from ..core.exceptions import ValidationError

# Sentinel meaning "leave this value unchanged"
SANITIZE_SKIP = "no"

DEFAULT_SANITIZE_EMAIL = "user+%uid@localhost.localdomain"
DEFAULT_SANITIZE_PASSWORD = "password"

# Placeholders understood by the sanitize-email pattern
EMAIL_PLACEHOLDERS = ("%uid", "%mail", "%name")

_FIELD_NAME_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def parse_whitelist_fields(raw: str | None) -> frozenset[str]:
    """Parse a comma delimited list of field names.

    Args:
        raw: Value of the whitelist-fields option, e.g. "field_bio, field_phone"

    Returns:
        frozenset[str]: Field names with surrounding whitespace removed

    Raises:
        ValidationError: If a field name contains unexpected characters
    """
    if not raw:
        return frozenset()

    names = set()
    for part in raw.split(","):
        name = part.strip()
        if not name:
            continue
        if not _FIELD_NAME_PATTERN.match(name):
            raise ValidationError(
                "Invalid field name in whitelist",
                field="whitelist-fields",
                value=name,
            )
        names.add(name)
    return frozenset(names)


@dataclass(frozen=True)
class OperationOptions:
    """Immutable options for one sanitize invocation.

    Constructed once from CLI or environment input and handed read-only to
    every confirmation provider and sanitize action.
    """

    db_prefix: bool = False
    db_url: str = ""
    sanitize_email: str = DEFAULT_SANITIZE_EMAIL
    sanitize_password: str = DEFAULT_SANITIZE_PASSWORD
    whitelist_fields: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        """Validate option values."""
        if not self.sanitize_email:
            raise ValidationError(
                "Email pattern cannot be empty", field="sanitize-email"
            )
        if not self.sanitize_password:
            raise ValidationError(
                "Password cannot be empty", field="sanitize-password"
            )
        if not isinstance(self.whitelist_fields, frozenset):
            object.__setattr__(
                self, "whitelist_fields", frozenset(self.whitelist_fields)
            )

    @classmethod
    def from_cli(
        cls,
        db_prefix: bool = False,
        db_url: str | None = None,
        sanitize_email: str = DEFAULT_SANITIZE_EMAIL,
        sanitize_password: str = DEFAULT_SANITIZE_PASSWORD,
        whitelist_fields: str | None = "",
    ) -> "OperationOptions":
        """Create options from raw command line values.

        Args:
            db_prefix: Enable table-prefix substitution
            db_url: Database URL override
            sanitize_email: Email pattern or "no"
            sanitize_password: Password or "no"
            whitelist_fields: Comma delimited list of exempt fields

        Returns:
            OperationOptions: Validated options
        """
        return cls(
            db_prefix=db_prefix,
            db_url=(db_url or "").strip(),
            sanitize_email=sanitize_email.strip(),
            sanitize_password=sanitize_password,
            whitelist_fields=parse_whitelist_fields(whitelist_fields),
        )

    @property
    def sanitize_emails(self) -> bool:
        """Whether email addresses should be rewritten."""
        return self.sanitize_email != SANITIZE_SKIP

    @property
    def sanitize_passwords(self) -> bool:
        """Whether passwords should be reset."""
        return self.sanitize_password != SANITIZE_SKIP

    @property
    def email_is_pattern(self) -> bool:
        """Whether the email option contains per-user placeholders."""
        return "%" in self.sanitize_email

    def is_whitelisted(self, field_name: str) -> bool:
        """Check whether a field is exempt from sanitization."""
        return field_name in self.whitelist_fields

    def to_dict(self) -> dict[str, Any]:
        """Convert options to dictionary format.

        Returns:
            Dict[str, Any]: Options as dictionary
        """
        return {
            "db_prefix": self.db_prefix,
            "db_url": "***REDACTED***" if self.db_url else "",
            "sanitize_email": self.sanitize_email,
            "sanitize_password": (
                SANITIZE_SKIP if not self.sanitize_passwords else "***REDACTED***"
            ),
            "whitelist_fields": sorted(self.whitelist_fields),
        }
