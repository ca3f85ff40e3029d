"""
Error types shared by the utility modules.
"""


class InvalidFormatError(OSError):
    """
    Raised when some data has the wrong format.

    Typically used by file readers that expected another format. Can be
    built from a message, an underlying cause, or both; the cause is
    chained so tracebacks show the original error.
    """

    def __init__(self, message: str | None = None, cause: BaseException | None = None):
        if message is None and cause is not None:
            message = str(cause)
        if message is None:
            super().__init__()
        else:
            super().__init__(message)
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause
