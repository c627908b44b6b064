"""Postal location of a place."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    """Where a place is."""

    continent: str
    country: str
    city: str = ""
    street: str = ""
    street_number: str = ""
