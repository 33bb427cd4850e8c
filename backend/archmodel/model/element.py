"""
Element - base identity record shared by every node in the architecture graph.

Elements are minted by a Model, never by callers directly. The Model is the
explicit context every element holds: it owns id minting, the global element
index and the global relationship index. An element only stores the *id* of
its parent, so the parent link is a lookup into the Model, never ownership.

Equality is defined on canonical name. Renaming an element (or moving its
parent) changes its equality and hash, so an element already stored in a
set or used as a dict key can become unreachable or collide with another.
"""

import logging
from typing import TYPE_CHECKING, Dict, List, Optional, Union

from . import tags as tag_names
from .canonical import CANONICAL_NAME_SEPARATOR, format_for_canonical_name
from .errors import InvalidArgumentError

if TYPE_CHECKING:
    from .model import Model
    from .relationship import InteractionStyle, Relationship

logger = logging.getLogger(__name__)


class Element:
    """Base class for Person, SoftwareSystem, Container and Component."""

    kind_tag: str = ""

    def __init__(
        self,
        model: "Model",
        element_id: str,
        name: str,
        description: Optional[str] = None,
        parent: Optional["Element"] = None,
    ):
        self._model = model
        self._id = element_id
        self._parent_id = parent.id if parent is not None else None
        self.name = name
        self.description = description
        self.url: Optional[str] = None
        self.properties: Dict[str, str] = {}
        self._extra_tags: List[str] = []
        self._relationships: Dict[str, "Relationship"] = {}

    # -------------------------
    # Identity
    # -------------------------

    @property
    def id(self) -> str:
        return self._id

    @property
    def model(self) -> "Model":
        return self._model

    @property
    def parent_id(self) -> Optional[str]:
        return self._parent_id

    @property
    def parent(self) -> Optional["Element"]:
        if self._parent_id is None:
            return None
        return self._model.get_element(self._parent_id)

    @property
    def canonical_name(self) -> str:
        parent = self.parent
        prefix = parent.canonical_name if parent is not None else self._model.canonical_name
        return prefix + CANONICAL_NAME_SEPARATOR + format_for_canonical_name(self.name)

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, Element):
            return NotImplemented
        return self.canonical_name == other.canonical_name

    def __hash__(self):
        return hash(self.canonical_name)

    def __repr__(self):
        return f"{type(self).__name__}(id={self._id!r}, name={self.name!r})"

    # -------------------------
    # Tags
    # -------------------------

    def required_tags(self) -> List[str]:
        return [tag_names.ELEMENT, self.kind_tag]

    @property
    def tags(self) -> List[str]:
        return self.required_tags() + list(self._extra_tags)

    def add_tags(self, *tags: str) -> None:
        required = self.required_tags()
        for tag in tags:
            if not tag:
                continue
            tag = tag.strip()
            if tag and tag not in required and tag not in self._extra_tags:
                self._extra_tags.append(tag)

    def remove_tag(self, tag: str) -> bool:
        """Remove a caller-added tag. Required tags stay put."""
        if tag in self._extra_tags:
            self._extra_tags.remove(tag)
            return True
        return False

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags

    # -------------------------
    # Outgoing relationships
    # -------------------------

    @property
    def relationships(self) -> List["Relationship"]:
        return list(self._relationships.values())

    def uses(
        self,
        destination: "Element",
        description: str,
        technology: Optional[str] = None,
        interaction_style: Optional["InteractionStyle"] = None,
    ) -> Optional["Relationship"]:
        return self._model.add_relationship(
            self, destination, description, technology, interaction_style
        )

    def has_efferent_relationship_with(self, element: Optional["Element"]) -> bool:
        return self.get_efferent_relationship_with(element) is not None

    def get_efferent_relationship_with(self, element: Optional["Element"]) -> Optional["Relationship"]:
        if element is None:
            return None
        for relationship in self._relationships.values():
            if relationship.destination_id == element.id:
                return relationship
        return None

    def remove_all_relationships_with(self, element_id: str) -> int:
        """Strip every outgoing relationship whose source or destination is element_id."""
        doomed = [
            r for r in self._relationships.values()
            if r.touches(element_id)
        ]
        for relationship in doomed:
            self._model.remove_relationship(relationship)
        return len(doomed)


ChildRef = Union[Element, str]


class ParentElement(Element):
    """
    An element that owns a collection of children of a single kind.

    The collection is keyed by child id and holds at most one child per name.
    Enumeration follows insertion order. Everything exposed is a snapshot.
    """

    child_kind: type = Element

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._children: Dict[str, Element] = {}

    @property
    def children(self) -> List[Element]:
        return list(self._children.values())

    def add_child(
        self, name: str, description: Optional[str] = None, technology: Optional[str] = None
    ) -> Element:
        return self._model.add_element(self, name, description, technology)

    def find_child_by_name(self, name: Optional[str]) -> Optional[Element]:
        if name is None:
            return None
        for child in self._children.values():
            if child.name == name:
                return child
        return None

    def find_child_by_type(self, type_name: Optional[str]) -> Optional[Element]:
        if type_name is None:
            return None
        for child in self._children.values():
            if getattr(child, "type", None) == type_name:
                return child
        return None

    def owns(self, child: Optional[Element]) -> bool:
        return child is not None and self._children.get(child.id) is child

    def remove_child(self, child_or_id: Optional[ChildRef]) -> bool:
        """
        Remove a child and everything that points at it.

        Returns False (and does nothing) if the argument is not a live child
        of this element.
        """
        child = self._resolve_child(child_or_id)
        if child is None:
            logger.debug("[MODEL] %s: nothing to remove for %r", self.canonical_name, child_or_id)
            return False

        del self._children[child.id]
        for sibling in self._children.values():
            sibling.remove_all_relationships_with(child.id)

        self._model.delete_element(child)
        return True

    def _resolve_child(self, child_or_id: Optional[ChildRef]) -> Optional[Element]:
        if child_or_id is None:
            return None
        if isinstance(child_or_id, str):
            return self._children.get(child_or_id)
        if self.owns(child_or_id):
            return child_or_id
        return None

    def _register_child(self, child: Element) -> bool:
        if not isinstance(child, self.child_kind):
            raise InvalidArgumentError(
                f"{type(self).__name__} cannot hold {type(child).__name__}"
            )
        if self.find_child_by_name(child.name) is not None:
            return False
        self._children[child.id] = child
        return True

    def _detach_child(self, child: Element) -> None:
        if self.owns(child):
            del self._children[child.id]
