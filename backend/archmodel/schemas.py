from pydantic import BaseModel, Field
from typing import Optional, Dict, List, Literal


# ---- Requests ----

class CreateWorkspaceRequest(BaseModel):
    name: str
    description: Optional[str] = None


class AddElementRequest(BaseModel):
    name: str
    description: Optional[str] = None
    location: Literal["Unspecified", "Internal", "External"] = "Unspecified"


class AddContainerRequest(BaseModel):
    name: str
    description: Optional[str] = None
    technology: Optional[str] = None


class AddComponentRequest(BaseModel):
    name: str
    description: Optional[str] = None
    technology: Optional[str] = None
    type: Optional[str] = None


class AddRelationshipRequest(BaseModel):
    source_id: str
    destination_id: str
    description: Optional[str] = None
    technology: Optional[str] = None
    interaction_style: Literal["Synchronous", "Asynchronous"] = "Synchronous"


# ---- Serialized workspace ----

class RelationshipSchema(BaseModel):
    id: str
    source_id: str = Field(serialization_alias="sourceId")
    destination_id: str = Field(serialization_alias="destinationId")
    description: Optional[str] = None
    technology: Optional[str] = None
    tags: str
    interaction_style: str = Field(serialization_alias="interactionStyle")
    url: Optional[str] = None


class ElementSchema(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    tags: str
    url: Optional[str] = None
    properties: Dict[str, str] = Field(default_factory=dict)
    relationships: List[RelationshipSchema] = Field(default_factory=list)


class ComponentSchema(ElementSchema):
    technology: Optional[str] = None
    type: Optional[str] = None
    size: Optional[int] = None


class ContainerSchema(ElementSchema):
    technology: Optional[str] = None
    components: List[ComponentSchema] = Field(default_factory=list)


class PersonSchema(ElementSchema):
    location: str


class SoftwareSystemSchema(ElementSchema):
    location: str
    containers: List[ContainerSchema] = Field(default_factory=list)


class ModelSchema(BaseModel):
    people: List[PersonSchema] = Field(default_factory=list)
    software_systems: List[SoftwareSystemSchema] = Field(
        default_factory=list, serialization_alias="softwareSystems"
    )


class WorkspaceSchema(BaseModel):
    name: str
    description: Optional[str] = None
    model: ModelSchema


class WorkspaceResponse(BaseModel):
    id: str
    digest: str
    workspace: WorkspaceSchema


class CreatedResponse(BaseModel):
    id: Optional[str] = None  # None when a duplicate was ignored
    canonical_name: Optional[str] = None
