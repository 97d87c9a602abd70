"""Custom exceptions for the document context."""


class InvalidDocumentError(ValueError):
    """
    Exception raised when a document mapping does not have the expected shape.

    Attributes:
        message: Error description
        where: Location of the offending value (e.g., 'experience[2]')
    """

    def __init__(self, message: str, where: str = ""):
        self.message = message
        self.where = where
        super().__init__(f"{where}: {message}" if where else message)
