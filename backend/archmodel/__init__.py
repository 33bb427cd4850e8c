"""
archmodel - build an in-memory description of a software architecture
(people, software systems, containers, components and their relationships)
and serialize it for diagramming tools.
"""

from archmodel.model import (
    Component,
    Container,
    Element,
    InteractionStyle,
    InvalidArgumentError,
    Location,
    Model,
    ModelIntegrityError,
    Person,
    Relationship,
    SoftwareSystem,
    Workspace,
)

__version__ = "0.1.0"

__all__ = [
    "Component",
    "Container",
    "Element",
    "InteractionStyle",
    "InvalidArgumentError",
    "Location",
    "Model",
    "ModelIntegrityError",
    "Person",
    "Relationship",
    "SoftwareSystem",
    "Workspace",
]
