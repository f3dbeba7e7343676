"""Errors raised by the booking core.

Every error carries a message meant for the person at the front desk, the
HTTP layer renders it as ``{"success": false, "error": message}``.
"""


class BookingError(Exception):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class Unauthenticated(BookingError):
    status_code = 401

    def __init__(self, message: str = "Not signed in"):
        super().__init__(message)


class NotFound(BookingError):
    status_code = 404


class Conflict(BookingError):
    status_code = 409


class InvalidState(BookingError):
    status_code = 400


class InvalidInput(BookingError):
    status_code = 400
