class MarketplaceError(Exception):
    """Base class for errors raised by the domain services."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ValidationError(MarketplaceError):
    status_code = 400


class NotFound(MarketplaceError):
    status_code = 404


class Conflict(MarketplaceError):
    status_code = 409


class StorageError(MarketplaceError):
    status_code = 503
