"""Parser error types."""


class ParseError(Exception):
    """Raised when component source cannot be parsed."""

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        token: str | None = None,
    ):
        self.message = message
        self.line = line
        self.column = column
        self.token = token
        super().__init__(message)

    def __str__(self) -> str:
        message = super().__str__()
        if self.line is not None:
            return f"{message} (line {self.line}, column {self.column})"
        return message
