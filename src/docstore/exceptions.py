class DocstoreError(Exception):
    pass


class InvalidArgument(DocstoreError, ValueError):
    """Raised by save when a required document field is missing or empty."""

    def __init__(self, message: str, field: str):
        super().__init__(message)
        self.field: str = field
