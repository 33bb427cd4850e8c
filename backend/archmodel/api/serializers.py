from typing import Iterable, List, TypeVar

from archmodel.model import (
    Component,
    Container,
    Element,
    Person,
    Relationship,
    SoftwareSystem,
    Workspace,
)
from archmodel.schemas import (
    ComponentSchema,
    ContainerSchema,
    ModelSchema,
    PersonSchema,
    RelationshipSchema,
    SoftwareSystemSchema,
    WorkspaceSchema,
)

T = TypeVar("T", Element, Relationship)


def by_id(items: Iterable[T]) -> List[T]:
    """
    Deterministic output order.
    Ids are minted as increasing decimal strings, so numeric order is creation order.
    """
    return sorted(items, key=lambda item: (len(item.id), item.id))


def join_tags(tags: List[str]) -> str:
    return ",".join(tags)


def serialize_relationship(relationship: Relationship) -> RelationshipSchema:
    return RelationshipSchema(
        id=relationship.id,
        source_id=relationship.source_id,
        destination_id=relationship.destination_id,
        description=relationship.description,
        technology=relationship.technology,
        tags=join_tags(relationship.tags),
        interaction_style=relationship.interaction_style.value,
        url=relationship.url,
    )


def _element_fields(element: Element) -> dict:
    return {
        "id": element.id,
        "name": element.name,
        "description": element.description,
        "tags": join_tags(element.tags),
        "url": element.url,
        "properties": dict(element.properties),
        "relationships": [serialize_relationship(r) for r in by_id(element.relationships)],
    }


def serialize_component(component: Component) -> ComponentSchema:
    return ComponentSchema(
        **_element_fields(component),
        technology=component.technology,
        type=component.type,
        size=component.size,
    )


def serialize_container(container: Container) -> ContainerSchema:
    return ContainerSchema(
        **_element_fields(container),
        technology=container.technology,
        components=[serialize_component(c) for c in by_id(container.components)],
    )


def serialize_person(person: Person) -> PersonSchema:
    return PersonSchema(**_element_fields(person), location=person.location.value)


def serialize_software_system(software_system: SoftwareSystem) -> SoftwareSystemSchema:
    return SoftwareSystemSchema(
        **_element_fields(software_system),
        location=software_system.location.value,
        containers=[serialize_container(c) for c in by_id(software_system.containers)],
    )


def serialize_workspace(workspace: Workspace) -> WorkspaceSchema:
    model = workspace.model
    return WorkspaceSchema(
        name=workspace.name,
        description=workspace.description,
        model=ModelSchema(
            people=[serialize_person(p) for p in by_id(model.people)],
            software_systems=[serialize_software_system(s) for s in by_id(model.software_systems)],
        ),
    )


def workspace_to_json(workspace: Workspace) -> str:
    return serialize_workspace(workspace).model_dump_json(by_alias=True, exclude_none=True)
