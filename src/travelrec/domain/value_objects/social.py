"""Social profile link."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Social:
    """Link to a user's profile on another network."""

    name: str
    link: str
    icon: str
