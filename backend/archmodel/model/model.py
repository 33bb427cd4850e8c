"""
Model - the registry that owns every element and relationship of a workspace.

The Model mints ids, enforces name uniqueness within each parent, performs
cascading deletes and resolves elements by id or canonical name. It is an
explicit context object: every element holds a reference to the Model that
created it and there is no module-level default Model.

The Model assumes a single writer while it is being built. Callers that
mutate it from several threads must serialise access themselves.
"""

import itertools
import logging
from typing import Dict, Iterator, List, Optional, Type, Union

from .component import Component, format_type_name
from .container import Container
from .element import Element, ParentElement
from .errors import IntegrityIssue, InvalidArgumentError, ModelIntegrityError
from .person import Location, Person
from .relationship import InteractionStyle, Relationship
from .software_system import SoftwareSystem

logger = logging.getLogger(__name__)

ElementRef = Union[Element, str]


class Model:
    canonical_name = ""

    def __init__(self):
        self._elements: Dict[str, Element] = {}
        self._relationships: Dict[str, Relationship] = {}
        # Elements and relationships share one sequence; ids are never reused.
        self._id_sequence = itertools.count(1)

    def _next_id(self) -> str:
        return str(next(self._id_sequence))

    # -------------------------
    # Lookups
    # -------------------------

    @property
    def elements(self) -> List[Element]:
        return list(self._elements.values())

    @property
    def relationships(self) -> List[Relationship]:
        return list(self._relationships.values())

    @property
    def people(self) -> List[Person]:
        return [e for e in self._elements.values() if isinstance(e, Person)]

    @property
    def software_systems(self) -> List[SoftwareSystem]:
        return [e for e in self._elements.values() if isinstance(e, SoftwareSystem)]

    def contains(self, element: Optional[Element]) -> bool:
        return element is not None and self._elements.get(element.id) is element

    def get_element(self, element_id: Optional[str]) -> Optional[Element]:
        if element_id is None:
            return None
        return self._elements.get(element_id)

    def get_relationship(self, relationship_id: Optional[str]) -> Optional[Relationship]:
        if relationship_id is None:
            return None
        return self._relationships.get(relationship_id)

    def get_element_with_canonical_name(self, canonical_name: Optional[str]) -> Optional[Element]:
        if canonical_name is None:
            return None
        for element in self._elements.values():
            if element.canonical_name == canonical_name:
                return element
        return None

    def get_person_with_name(self, name: Optional[str]) -> Optional[Person]:
        return self._find_root(Person, name)

    def get_software_system_with_name(self, name: Optional[str]) -> Optional[SoftwareSystem]:
        return self._find_root(SoftwareSystem, name)

    def _find_root(self, kind: Type[Element], name: Optional[str]) -> Optional[Element]:
        if name is None:
            return None
        for element in self._elements.values():
            if type(element) is kind and element.parent_id is None and element.name == name:
                return element
        return None

    def _roots(self) -> Iterator[Element]:
        return (e for e in self._elements.values() if e.parent_id is None)

    # -------------------------
    # Creation
    # -------------------------

    def add_person(
        self,
        name: str,
        description: Optional[str] = None,
        location: Location = Location.UNSPECIFIED,
    ) -> Person:
        return self._add_root(Person, name, description, location)

    def add_software_system(
        self,
        name: str,
        description: Optional[str] = None,
        location: Location = Location.UNSPECIFIED,
    ) -> SoftwareSystem:
        return self._add_root(SoftwareSystem, name, description, location)

    def add_container(
        self,
        software_system: SoftwareSystem,
        name: str,
        description: Optional[str] = None,
        technology: Optional[str] = None,
    ) -> Container:
        self._check_parent(software_system, SoftwareSystem)
        return self._add_child(software_system, name, description, technology=technology)

    def add_component(
        self,
        container: Container,
        name: str,
        description: Optional[str] = None,
        technology: Optional[str] = None,
        type=None,
    ) -> Component:
        self._check_parent(container, Container)
        type_name = format_type_name(type)
        return self._add_child(container, name, description, technology=technology, type=type_name)

    def add_element(
        self,
        parent: ParentElement,
        name: str,
        description: Optional[str] = None,
        technology: Optional[str] = None,
    ) -> Element:
        """Create a child of whatever kind `parent` holds."""
        if isinstance(parent, SoftwareSystem):
            return self.add_container(parent, name, description, technology)
        if isinstance(parent, Container):
            return self.add_component(parent, name, description, technology)
        raise InvalidArgumentError(
            f"{type(parent).__name__} cannot contain child elements"
        )

    def _add_root(self, kind, name, description, location) -> Element:
        self._check_name(name)
        if not isinstance(location, Location):
            raise InvalidArgumentError(f"unknown location: {location!r}")

        existing = self._find_root(kind, name)
        if existing is not None:
            logger.debug("[MODEL] duplicate %s %r ignored", kind.kind_tag, name)
            return existing

        element = kind(self, self._next_id(), name, description)
        element.location = location
        self._elements[element.id] = element
        logger.debug("[MODEL] added %s %s (id=%s)", kind.kind_tag, element.canonical_name, element.id)
        return element

    def _add_child(self, parent: ParentElement, name, description, **attributes) -> Element:
        self._check_name(name)

        existing = parent.find_child_by_name(name)
        if existing is not None:
            logger.debug(
                "[MODEL] duplicate %s %r under %s ignored",
                parent.child_kind.kind_tag, name, parent.canonical_name,
            )
            return existing

        child = parent.child_kind(self, self._next_id(), name, description, parent=parent)
        for key, value in attributes.items():
            setattr(child, key, value)

        # A refused child never enters the global index.
        if not parent._register_child(child):
            logger.debug(
                "[MODEL] %s refused %r; returning the registered child",
                parent.canonical_name, name,
            )
            return parent.find_child_by_name(name)
        self._elements[child.id] = child
        logger.debug(
            "[MODEL] added %s %s (id=%s)", child.kind_tag, child.canonical_name, child.id
        )
        return child

    def _check_parent(self, parent, kind: Type[ParentElement]) -> None:
        if not isinstance(parent, kind):
            raise InvalidArgumentError(
                f"expected a {kind.kind_tag} as parent, got {type(parent).__name__}"
            )
        if not self.contains(parent):
            raise InvalidArgumentError(f"{parent!r} does not belong to this model")

    @staticmethod
    def _check_name(name) -> None:
        if not isinstance(name, str) or not name.strip():
            raise InvalidArgumentError("element name must be a non-empty string")

    # -------------------------
    # Relationships
    # -------------------------

    def add_relationship(
        self,
        source: Element,
        destination: Element,
        description: Optional[str] = None,
        technology: Optional[str] = None,
        interaction_style: Optional[InteractionStyle] = None,
    ) -> Optional[Relationship]:
        """
        Join any two elements of this model, at any level.

        Returns None when `source` already has a relationship to
        `destination` with the same description.
        """
        for end in (source, destination):
            if not isinstance(end, Element) or not self.contains(end):
                raise InvalidArgumentError(f"{end!r} does not belong to this model")
        if interaction_style is None:
            interaction_style = InteractionStyle.SYNCHRONOUS
        elif not isinstance(interaction_style, InteractionStyle):
            raise InvalidArgumentError(f"unknown interaction style: {interaction_style!r}")

        for existing in source.relationships:
            if existing.destination_id == destination.id and existing.description == description:
                logger.debug(
                    "[MODEL] duplicate relationship %s -> %s (%r) ignored",
                    source.id, destination.id, description,
                )
                return None

        relationship = Relationship(
            self,
            self._next_id(),
            source.id,
            destination.id,
            description,
            technology,
            interaction_style,
        )
        source._relationships[relationship.id] = relationship
        self._relationships[relationship.id] = relationship
        return relationship

    def remove_relationship(self, relationship: Optional[Relationship]) -> bool:
        if relationship is None or self._relationships.get(relationship.id) is not relationship:
            return False
        del self._relationships[relationship.id]
        source = self._elements.get(relationship.source_id)
        if source is not None:
            source._relationships.pop(relationship.id, None)
        return True

    def get_relationships_with(self, element: Optional[Element]) -> List[Relationship]:
        """Every relationship that has `element` at either end."""
        if element is None:
            return []
        return [r for r in self._relationships.values() if r.touches(element.id)]

    def get_relationships_between(
        self, source: Optional[Element], destination: Optional[Element]
    ) -> List[Relationship]:
        if source is None or destination is None:
            return []
        return [
            r for r in self._relationships.values()
            if r.source_id == source.id and r.destination_id == destination.id
        ]

    # -------------------------
    # Deletion
    # -------------------------

    def remove_element(self, element_or_id: Optional[ElementRef]) -> bool:
        """
        Remove an element through its owning parent.

        People and software systems are owned by the Model itself.
        """
        element = self._resolve(element_or_id)
        if element is None:
            return False

        parent = element.parent
        if isinstance(parent, ParentElement):
            return parent.remove_child(element)

        for sibling in self._roots():
            if sibling is not element:
                sibling.remove_all_relationships_with(element.id)
        return self.delete_element(element)

    def remove_person(self, person: Optional[ElementRef]) -> bool:
        return isinstance(self._resolve(person), Person) and self.remove_element(person)

    def remove_software_system(self, software_system: Optional[ElementRef]) -> bool:
        return (
            isinstance(self._resolve(software_system), SoftwareSystem)
            and self.remove_element(software_system)
        )

    def delete_element(self, element_or_id: Optional[ElementRef]) -> bool:
        """
        Purge an element, its descendants and every relationship touching them.

        Deleting an element that is no longer registered is a no-op.
        """
        element = self._resolve(element_or_id)
        if element is None:
            logger.debug("[MODEL] delete of unknown element %r ignored", element_or_id)
            return False

        self._purge(element)
        self.check_integrity()
        return True

    def _purge(self, element: Element) -> None:
        if isinstance(element, ParentElement):
            for child in element.children:
                element._detach_child(child)
                self._purge(child)

        parent = element.parent
        if isinstance(parent, ParentElement):
            parent._detach_child(element)

        for relationship in list(self._relationships.values()):
            if relationship.touches(element.id):
                self.remove_relationship(relationship)
        element._relationships.clear()

        del self._elements[element.id]
        logger.debug("[MODEL] deleted %s %s (id=%s)", element.kind_tag, element.name, element.id)

    def _resolve(self, element_or_id: Optional[ElementRef]) -> Optional[Element]:
        if element_or_id is None:
            return None
        if isinstance(element_or_id, str):
            return self._elements.get(element_or_id)
        if self.contains(element_or_id):
            return element_or_id
        return None

    # -------------------------
    # Integrity
    # -------------------------

    def find_integrity_issues(self) -> List[IntegrityIssue]:
        issues = []

        for relationship in self._relationships.values():
            for end_id in (relationship.source_id, relationship.destination_id):
                if end_id not in self._elements:
                    issues.append(IntegrityIssue(
                        code="DANGLING_RELATIONSHIP",
                        message=f"relationship references missing element {end_id}",
                        object_id=relationship.id,
                    ))
            source = self._elements.get(relationship.source_id)
            if source is not None and relationship.id not in source._relationships:
                issues.append(IntegrityIssue(
                    code="UNOWNED_RELATIONSHIP",
                    message="relationship is missing from its source element",
                    object_id=relationship.id,
                ))

        for element in self._elements.values():
            for relationship_id in element._relationships:
                if relationship_id not in self._relationships:
                    issues.append(IntegrityIssue(
                        code="UNREGISTERED_RELATIONSHIP",
                        message=f"relationship {relationship_id} is not registered with the model",
                        object_id=element.id,
                    ))
            if element.parent_id is None:
                continue
            parent = self._elements.get(element.parent_id)
            if not isinstance(parent, ParentElement) or not parent.owns(element):
                issues.append(IntegrityIssue(
                    code="ORPHANED_ELEMENT",
                    message=f"parent {element.parent_id} does not hold this element",
                    object_id=element.id,
                ))

        return issues

    def check_integrity(self) -> None:
        issues = self.find_integrity_issues()
        if issues:
            for issue in issues:
                logger.error("[MODEL] integrity: [%s] %s (%s)", issue.code, issue.message, issue.object_id)
            raise ModelIntegrityError(
                f"model integrity violated: {issues[0].message} ({issues[0].object_id})"
            )
