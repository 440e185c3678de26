"""
Exceptions raised by nlpstats
"""


class StatsError(Exception):
    """Base class for all nlpstats errors"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message


class InvalidStatus(StatsError, KeyError):
    """
    Raised when a status key is not part of the status vocabulary.

    Attributes
    ----------
    status : object
        The rejected status value
    valid : tuple of str
        All accepted status keys, sorted
    """

    def __init__(self, status, valid):
        self.status = status
        self.valid = tuple(valid)
        super().__init__(
            f"status {status!r} is not a valid status. "
            f"Use one of the following: {', '.join(self.valid)}"
        )


class UnknownField(StatsError, KeyError):
    """Raised when a field name is neither a counter nor a record field"""

    def __init__(self, name):
        self.name = name
        super().__init__(f"Unknown field {name!r}")


class MissingHeaderLabel(StatsError, KeyError):
    """Raised when a field has no entry in the header label table"""

    def __init__(self, name):
        self.name = name
        super().__init__(f"No header label for field {name!r}")
