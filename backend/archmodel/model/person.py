from enum import Enum

from . import tags
from .element import Element


class Location(Enum):
    UNSPECIFIED = "Unspecified"
    INTERNAL = "Internal"
    EXTERNAL = "External"


class Person(Element):
    """A user of the software systems being described. Has no children."""

    kind_tag = tags.PERSON

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.location = Location.UNSPECIFIED
