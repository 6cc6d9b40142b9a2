# ============================================
# tracker/exceptions.py
# ============================================


class TrackerError(Exception):
    """Base class for errors raised by the tracker backend layer."""

    code = 'error'
    default_message = 'Tracker error'

    def __init__(self, message: str = None, *, table: str = '', operation: str = ''):
        self.message = message or self.default_message
        self.table = table
        self.operation = operation
        super().__init__(self.message)


class BackendError(TrackerError):
    """Any backend failure that has no more specific meaning."""

    code = 'backend_error'
    default_message = 'Backend request failed'


class DuplicateError(BackendError):
    """A unique constraint rejected the write (e.g. member email)."""

    code = 'duplicate'
    default_message = 'Duplicate record'


class NotFoundError(TrackerError):
    code = 'not_found'
    default_message = 'Record not found'
