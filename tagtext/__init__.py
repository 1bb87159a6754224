"""
tagtext — inline tag parsing and rendering.

    (image: photo.jpg alt: A sunset link: /gallery)

is parsed into a :class:`~tagtext.services.tags.Tag` and rendered by the
handler registered for its type.
"""

__version__ = "0.1.0"
