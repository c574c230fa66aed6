"""
Errors raised by the record stores.

Stores only report what went wrong. Turning these into HTTP responses
(status code + envelope error code) is done by the handlers in main.py.
"""


class StoreError(Exception):
    """Base class for recoverable store failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(StoreError):
    """An identifier did not match any record in the store."""

    def __init__(self, entity: str, identifier: str):
        super().__init__(f"{entity} not found")
        self.entity = entity
        self.identifier = identifier


class ValidationError(StoreError):
    """Required input was missing or empty."""

    def __init__(self, message: str, missing: list[str] | None = None):
        super().__init__(message)
        self.missing = missing or []
