"""Exceptions reported by the sizing engine and its input validation.

Out-of-range engineering results (a required area above every standard
size, a current no cable carries) are not errors: the engine flags them on
the result. Only malformed input and an undefined voltage drop raise.
"""

from typing import Optional


class SizingError(ValueError):
    """Base class for every error the calculator reports to a front end."""


class InvalidInputError(SizingError):
    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message


class UndefinedVoltageDropError(SizingError):
    """Raised when the allowed voltage drop (V x p/100) is zero."""

    def __init__(self, voltage: float, max_drop_percent: Optional[float] = None):
        if max_drop_percent is None:
            msg = f"Voltage drop is undefined for a system voltage of {voltage} V"
        else:
            msg = (f"Voltage drop is undefined: {voltage} V at {max_drop_percent}% "
                   f"leaves no allowed drop")
        super().__init__(msg)
        self.voltage = voltage
        self.max_drop_percent = max_drop_percent


class UnknownCatalogKeyError(SizingError, KeyError):
    def __init__(self, catalog: str, key: str, known):
        self.catalog = catalog
        self.key = key
        self.known = tuple(known)
        super().__init__(f"Unknown {catalog} '{key}'. Expected one of: {', '.join(self.known)}")

    def __str__(self) -> str:
        # KeyError would otherwise quote the message
        return self.args[0]
