from enum import Enum
from typing import TYPE_CHECKING, List, Optional

from . import tags as tag_names

if TYPE_CHECKING:
    from .element import Element
    from .model import Model


class InteractionStyle(Enum):
    SYNCHRONOUS = tag_names.SYNCHRONOUS
    ASYNCHRONOUS = tag_names.ASYNCHRONOUS


class Relationship:
    """
    Directed, labelled edge between two elements of the same Model.

    Only element ids are held; `source` and `destination` resolve through the
    Model, so a relationship never keeps an element alive.
    """

    def __init__(
        self,
        model: "Model",
        relationship_id: str,
        source_id: str,
        destination_id: str,
        description: Optional[str] = None,
        technology: Optional[str] = None,
        interaction_style: InteractionStyle = InteractionStyle.SYNCHRONOUS,
    ):
        self._model = model
        self._id = relationship_id
        self._source_id = source_id
        self._destination_id = destination_id
        self.description = description
        self.technology = technology
        self.interaction_style = interaction_style
        self.url: Optional[str] = None
        self._extra_tags: List[str] = []

    @property
    def id(self) -> str:
        return self._id

    @property
    def source_id(self) -> str:
        return self._source_id

    @property
    def destination_id(self) -> str:
        return self._destination_id

    @property
    def source(self) -> Optional["Element"]:
        return self._model.get_element(self._source_id)

    @property
    def destination(self) -> Optional["Element"]:
        return self._model.get_element(self._destination_id)

    def touches(self, element_id: str) -> bool:
        return self._source_id == element_id or self._destination_id == element_id

    def required_tags(self) -> List[str]:
        return [tag_names.RELATIONSHIP, self.interaction_style.value]

    @property
    def tags(self) -> List[str]:
        return self.required_tags() + list(self._extra_tags)

    def add_tags(self, *tags: str) -> None:
        required = self.required_tags()
        for tag in tags:
            if tag and tag not in required and tag not in self._extra_tags:
                self._extra_tags.append(tag)

    # Two relationships are the same edge if they join the same ends with the same label.
    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, Relationship):
            return NotImplemented
        return (
            self._source_id == other._source_id
            and self._destination_id == other._destination_id
            and self.description == other.description
        )

    def __hash__(self):
        return hash((self._source_id, self._destination_id, self.description))

    def __repr__(self):
        return (
            f"Relationship(id={self._id!r}, {self._source_id!r} -> {self._destination_id!r}, "
            f"description={self.description!r})"
        )
