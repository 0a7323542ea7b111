"""Enum definitions and fixed values for listings."""

from enum import Enum

DEFAULT_RATING = 4.5

# Monthly rate is stored as this many nights
NIGHTS_PER_MONTH = 30


class PropertyType(str, Enum):
    """Known listing types. The column itself accepts any string."""

    APARTMENT = "apartment"
    HOUSE = "house"
    STUDIO = "studio"
    VILLA = "villa"
