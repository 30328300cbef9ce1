# backend/economy/core/errors.py
"""Error taxonomy for the economy store.

    EconomyError
    ├── MissingParameter       (400)
    ├── InvalidReference       (400)
    │   ├── InvalidType
    │   └── InvalidRarity
    ├── StackLimitExceeded     (400)
    ├── NotEquippable          (400)
    ├── NotFound               (404)
    ├── AlreadyExists          (409)
    ├── AlreadyInFaction       (409)
    └── StoreFailure           (500)

CRUD functions raise these; ``economy.main`` turns them into JSON responses
of the form ``{"detail": message, "code": code}``.
"""
from fastapi import status


class EconomyError(Exception):
    code = "economy_error"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingParameter(EconomyError):
    code = "missing_parameter"
    status_code = status.HTTP_400_BAD_REQUEST


class InvalidReference(EconomyError):
    code = "invalid_reference"
    status_code = status.HTTP_400_BAD_REQUEST


class InvalidType(InvalidReference):
    code = "invalid_type"


class InvalidRarity(InvalidReference):
    code = "invalid_rarity"


class StackLimitExceeded(EconomyError):
    code = "stack_limit_exceeded"
    status_code = status.HTTP_400_BAD_REQUEST


class NotEquippable(EconomyError):
    code = "not_equippable"
    status_code = status.HTTP_400_BAD_REQUEST


class NotFound(EconomyError):
    code = "not_found"
    status_code = status.HTTP_404_NOT_FOUND


class AlreadyExists(EconomyError):
    code = "already_exists"
    status_code = status.HTTP_409_CONFLICT


class AlreadyInFaction(EconomyError):
    code = "already_in_faction"
    status_code = status.HTTP_409_CONFLICT


class StoreFailure(EconomyError):
    """The database rejected or failed a statement. The session has been rolled back."""

    code = "store_failure"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
