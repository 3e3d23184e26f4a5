"""Error definitions for xliffer."""


class XliffError(Exception):
    """Base exception for all custom errors."""


class InvalidArgumentError(XliffError, ValueError):
    """Raised when a File is built from something that is not a <file> element."""


class NotFoundError(XliffError, KeyError):
    """Raised when a translation unit id is not present in a File."""

    def __init__(self, unit_id: str):
        super().__init__(unit_id)
        self.unit_id = unit_id

    def __str__(self) -> str:
        return f"No translation unit with id {self.unit_id!r}"
