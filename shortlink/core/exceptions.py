class ShortLinkError(Exception):
    """Base class for all shortlink errors."""


class InvalidCharacterError(ShortLinkError, ValueError):
    """Raised when a short code contains a character outside the alphabet."""

    def __init__(self, character: str, position: int):
        self.character = character
        self.position = position
        super().__init__(f"Invalid character in short URL: {character!r} at position {position}")


class HashConfigurationError(ShortLinkError, ValueError):
    pass


class HashFunctionError(ShortLinkError, TypeError):
    pass
