"""
Application-layer exceptions.

These exceptions are used across application and api layers.
"""
from typing import List, Optional


class RoutineValidationError(Exception):
    """Raised when a routine fails business validation.

    `errors` holds every individual problem found, not just the first.
    """

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or []
