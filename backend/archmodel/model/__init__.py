"""
Architecture model: people, software systems, containers, components and
the relationships between them.
"""

from archmodel.model.canonical import (
    CANONICAL_NAME_SEPARATOR,
    format_for_canonical_name,
    split_canonical_name,
)
from archmodel.model.component import Component
from archmodel.model.container import Container
from archmodel.model.element import Element, ParentElement
from archmodel.model.errors import (
    ArchModelError,
    IntegrityIssue,
    InvalidArgumentError,
    ModelIntegrityError,
)
from archmodel.model.model import Model
from archmodel.model.person import Location, Person
from archmodel.model.relationship import InteractionStyle, Relationship
from archmodel.model.software_system import SoftwareSystem
from archmodel.model.workspace import Workspace
from archmodel.model import tags

__all__ = [
    "CANONICAL_NAME_SEPARATOR",
    "format_for_canonical_name",
    "split_canonical_name",
    "Component",
    "Container",
    "Element",
    "ParentElement",
    "ArchModelError",
    "IntegrityIssue",
    "InvalidArgumentError",
    "ModelIntegrityError",
    "Model",
    "Location",
    "Person",
    "InteractionStyle",
    "Relationship",
    "SoftwareSystem",
    "Workspace",
    "tags",
]
