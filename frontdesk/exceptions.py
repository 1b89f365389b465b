"""Error types raised by the persistence layer"""


class FrontdeskError(Exception):
    """Base class for frontdesk errors"""


class StorageError(FrontdeskError):
    """A key-value slot could not be read or written"""

    def __init__(self, message: str, key: str = ""):
        super().__init__(message)
        self.key = key
