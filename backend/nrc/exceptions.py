class NRCError(Exception):
    status_code = 500

    def __init__(self, message: str, details: dict = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class RecordNotFound(NRCError):
    status_code = 404


class DuplicateRecord(NRCError):
    status_code = 400


class InvalidRequest(NRCError):
    status_code = 400


class InvalidState(NRCError):
    """The record exists but is not in a state that allows the operation."""
    status_code = 409


class StorageError(NRCError):
    status_code = 500
