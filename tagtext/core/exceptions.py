"""
Tag exception hierarchy.

Both errors carry the offending tag type in ``.name``.  Neither is caught
by the parser or renderer; recovery belongs to the caller.
"""


class TagError(Exception):
    """Base class for tag parsing and rendering failures."""

    def __init__(self, name: str, message: str) -> None:
        super().__init__(message)
        self.name = name


class UndefinedTagType(TagError):
    """The tag type has no registered definition."""

    def __init__(self, name: str) -> None:
        super().__init__(name, f"Undefined tag type: {name}")


class InvalidRenderHandler(TagError):
    """The tag type has no handler, or the stored handler cannot be called."""

    def __init__(self, name: str) -> None:
        super().__init__(name, f"Invalid tag render function in tag: {name}")
