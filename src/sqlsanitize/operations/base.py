"""Shared plumbing for the built-in sanitizers."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from contextlib import AbstractContextManager

from ..core.config import get_database_config
from ..core.registry import HandlerRegistry, Phase
from ..models.messages import ConfirmationMessages
from ..models.options import OperationOptions
from ..utils.db_utils import SanitizeDatabase, open_database

DatabaseFactory = Callable[[OperationOptions], AbstractContextManager[SanitizeDatabase]]


def database_for_options(
    options: OperationOptions,
) -> AbstractContextManager[SanitizeDatabase]:
    """Open the database selected by --db-url or the environment."""
    return open_database(get_database_config(options.db_url, options.db_prefix))


class BaseSanitizer(ABC):
    """A sanitizer contributing one provider and one action.

    Subclasses describe their work in messages() and perform it in
    sanitize(). register() wires both into a HandlerRegistry.
    """

    def __init__(self, database_factory: DatabaseFactory | None = None) -> None:
        self.database_factory = database_factory or database_for_options

    def register(self, registry: HandlerRegistry) -> None:
        """Register the provider and the action of this sanitizer."""
        registry.register(Phase.CONFIRM, self.messages)
        registry.register(Phase.EXECUTE, self.sanitize)

    @abstractmethod
    def messages(
        self, messages: ConfirmationMessages, options: OperationOptions
    ) -> None:
        """Describe the pending sanitization."""

    @abstractmethod
    def sanitize(self, options: OperationOptions) -> None:
        """Perform the sanitization."""
