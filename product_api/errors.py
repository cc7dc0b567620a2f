"""Errors raised by request handlers (-> HTTP status via the error responder)."""


class ProductAPIError(Exception):
    """Base error carrying the HTTP status it maps to."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def name(self) -> str:
        return type(self).__name__


class NotFoundError(ProductAPIError):
    """Requested product id is not in the store (-> HTTP 404)."""

    status_code = 404


class ValidationError(ProductAPIError):
    """One or more field rules violated (-> HTTP 400)."""

    status_code = 400


class AuthenticationError(ProductAPIError):
    """Missing or wrong x-api-key on a mutating request (-> HTTP 401)."""

    status_code = 401
