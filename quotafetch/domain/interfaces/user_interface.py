"""Interface for reporting fetch results to the user.

Defines the contract for displaying fetched documents, information, warnings
and errors, allowing different UI implementations (e.g., console, tests).
"""

import abc
from typing import Any

from quotafetch.domain.models.common import JSONValue


class UserInterface(abc.ABC):
    """Abstract Base Class for user-facing output."""

    @abc.abstractmethod
    def display_json(self, document: JSONValue, **kwargs: Any) -> None:
        """Displays a decoded JSON document.

        Args:
            document: The document to render.
            **kwargs: Additional arguments for formatting (e.g., title).
        """
        pass

    @abc.abstractmethod
    def display_error(self, error_message: str, **kwargs: Any) -> None:
        """Displays an error message to the user."""
        pass

    @abc.abstractmethod
    def display_warning(self, warning_message: str, **kwargs: Any) -> None:
        """Displays a warning message to the user."""
        pass

    @abc.abstractmethod
    def display_info(self, info_message: str, **kwargs: Any) -> None:
        """Displays an informational message to the user."""
        pass
