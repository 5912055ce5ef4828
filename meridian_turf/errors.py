"""
Turf Errors
===========

Exceptions raised by the algorithm layer. Every failure is a programmer or
input error, raised immediately at the point of detection.
"""


class TurfError(Exception):
    """Raised when an algorithm precondition is violated."""
    pass


class UnitNotSupportedError(TurfError, KeyError):
    """Raised when a length unit name is not in the conversion table."""

    def __init__(self, unit: str, known=()):
        self.unit = unit
        message = f"Unit not supported: {unit!r}"
        if known:
            message += f" (expected one of: {', '.join(sorted(known))})"
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])
