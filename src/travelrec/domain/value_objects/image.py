"""Image reference with alt text."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Image:
    """Image URL and its alternative text."""

    url: str
    alt: str
