"""Exceptions raised by the roof estimate engine."""

from pydantic import ValidationError


class InvalidInputError(ValueError):
    """Raised when input data has the wrong shape or type."""

    def __init__(self, message: str, field: str = ""):
        super().__init__(message)
        self.field = field

    @classmethod
    def from_validation_error(cls, exc: ValidationError, prefix: str = "") -> "InvalidInputError":
        """Build an error naming the first offending field of a pydantic failure."""
        first = exc.errors()[0]
        loc = ".".join(str(part) for part in first["loc"])
        field = f"{prefix}.{loc}" if prefix and loc else prefix or loc
        return cls(f"Invalid value for {field or 'input'}: {first['msg']}", field=field)
