__all__ = ['SkytrackException', 'InvalidArgument', 'DataTableError']


class SkytrackException(Exception):
    """
    Base exception for errors raised by the skytrack package.

    Attributes
        message: Explanation of the error.
    """

    def __init__(self, message):
        self.message = message
        super().__init__(self.message)


class InvalidArgument(SkytrackException, ValueError):
    """
    Exception raised when a value can't be used for a computation, such as a NaN coordinate component, an empty
    list of polynomial coefficients or a malformed interpolation table.

    Attributes
        message: Explanation of the error.
    """

    def __init__(self, message):
        self.message = message
        super().__init__(self.message)


class DataTableError(SkytrackException):
    """
    Exception raised when a row of a periodic series table can't be evaluated. This indicates a corrupted constant
    table and is not recoverable.

    Attributes
        message: Explanation of the error.
        row: The offending table row.
    """

    def __init__(self, message, row=None):
        self.message = message
        self.row = row
        super().__init__(self.message)
