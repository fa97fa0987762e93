"""Sanitize values stored in per-field user tables (user__<field>)."""

from typing import Any

from sqlalchemy.types import Integer

from ..models.messages import ConfirmationMessages
from ..models.options import OperationOptions
from ..utils.db_utils import SanitizeDatabase
from ..utils.logging_utils import get_logger
from ..utils.password_utils import generate_random_int
from .base import BaseSanitizer

logger = get_logger(__name__)

FIELD_TABLE_PREFIX = "user__"
VALUE_SUFFIXES = ("_value", "_summary")
ENTITY_COLUMN = "entity_id"


def find_user_fields(db: SanitizeDatabase) -> dict[str, str]:
    """Map user field names to their physical tables.

    Returns:
        dict[str, str]: field name -> table name, sorted by field name
    """
    table_prefix = db.table(FIELD_TABLE_PREFIX)
    fields = {
        table[len(table_prefix):]: table
        for table in db.table_names()
        if table.startswith(table_prefix) and len(table) > len(table_prefix)
    }
    return dict(sorted(fields.items()))


def _generated_value(column: dict[str, Any], field_name: str, entity_id: Any) -> Any:
    """Replacement value for one entity: a random number or "<field>-<entity_id>"."""
    if isinstance(column["type"], Integer):
        return generate_random_int()
    return f"{field_name}-{entity_id}"


class UserFieldsSanitizer(BaseSanitizer):
    """Overwrites every non-whitelisted user field with generated data."""

    def _fields(self, options: OperationOptions, db: SanitizeDatabase) -> dict[str, str]:
        return {
            name: table
            for name, table in find_user_fields(db).items()
            if not options.is_whitelisted(name)
        }

    def messages(
        self, messages: ConfirmationMessages, options: OperationOptions
    ) -> None:
        with self.database_factory(options) as db:
            fields = self._fields(options, db)
        if fields:
            messages.append(f"Sanitize user fields: {', '.join(fields)}.")

    def sanitize(self, options: OperationOptions) -> None:
        with self.database_factory(options) as db:
            plan = []
            for field_name, table in self._fields(options, db).items():
                columns = db.columns(table)
                if not any(column["name"] == ENTITY_COLUMN for column in columns):
                    logger.warning(f"Skipping {table}: no {ENTITY_COLUMN} column")
                    continue
                wanted = {f"{field_name}{suffix}" for suffix in VALUE_SUFFIXES}
                plan.append(
                    (field_name, table, [c for c in columns if c["name"] in wanted])
                )

            with db.transaction() as conn:
                for field_name, table, columns in plan:
                    rows = db.fetch_all(
                        f'SELECT DISTINCT "{ENTITY_COLUMN}" FROM "{table}"', conn=conn
                    )
                    for column in columns:
                        updates = [
                            {
                                "entity_id": row[ENTITY_COLUMN],
                                "value": _generated_value(
                                    column, field_name, row[ENTITY_COLUMN]
                                ),
                            }
                            for row in rows
                        ]
                        if not updates:
                            continue
                        # Identifiers come from the database schema itself
                        db.execute(
                            f'UPDATE "{table}" SET "{column["name"]}" = :value '
                            f'WHERE "{ENTITY_COLUMN}" = :entity_id',
                            updates,
                            conn=conn,
                        )
                    logger.info(
                        f"Sanitized user field {field_name} for {len(rows)} user(s)"
                    )
