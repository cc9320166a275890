"""Exceptions raised by the token engines."""


class TokenError(ValueError):
    """Base exception for chart token errors."""


class InvalidColorFormat(TokenError):
    """Raised when a color is not a ``#RRGGBB`` hex string."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid hex color: {value!r} (expected '#RRGGBB')")


class InvalidPaletteSize(TokenError):
    """Raised when a palette has too few or too many colors."""

    def __init__(self, count, expected: str = "2-12"):
        self.count = count
        super().__init__(f"Palette must have {expected} colors, got {count}")


class InvalidStepCount(TokenError):
    """Raised when a color scale cannot be built with the requested steps."""

    def __init__(self, steps, reason: str = "steps must be a positive integer"):
        self.steps = steps
        super().__init__(f"Invalid step count {steps}: {reason}")


class UnknownVariant(TokenError):
    """Raised for an option outside a fixed set (breakpoint, feature, ...)."""

    def __init__(self, kind: str, value, choices=()):
        self.kind = kind
        self.value = value
        message = f"Unknown {kind}: {value!r}"
        if choices:
            message += f" (expected one of: {', '.join(map(str, choices))})"
        super().__init__(message)
