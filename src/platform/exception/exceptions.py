class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class AuthenticationError(CustomBaseError):
    def __init__(self, message: str = 'Unauthorized') -> None:
        super().__init__(message, 401)


class ForbiddenError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 403)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class ConflictError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class PersistenceError(CustomBaseError):
    """A database-layer failure re-raised with a human-readable message; nothing was applied."""

    def __init__(self, message: str) -> None:
        super().__init__(message, 500)


class TicketTypeProvisioningError(PersistenceError):
    def __init__(self, reason: str) -> None:
        super().__init__(f'Could not create ticket type: {reason}')


class TicketTypeUpdateError(PersistenceError):
    def __init__(self, reason: str) -> None:
        super().__init__(f'Could not update ticket type: {reason}')


class StorageError(CustomBaseError):
    def __init__(self, message: str = 'Failed to upload file') -> None:
        super().__init__(message, 500)
