import logging
from contextlib import contextmanager
from typing import Iterator

from fastapi import APIRouter, Depends, HTTPException, Request, Response

from archmodel.api.serializers import serialize_workspace, workspace_to_json
from archmodel.api.store import WorkspaceStore
from archmodel.client.digest import Md5Digest
from archmodel.model import (
    Container,
    InteractionStyle,
    InvalidArgumentError,
    Location,
    SoftwareSystem,
    Workspace,
)
from archmodel.schemas import (
    AddComponentRequest,
    AddContainerRequest,
    AddElementRequest,
    AddRelationshipRequest,
    CreatedResponse,
    CreateWorkspaceRequest,
    WorkspaceResponse,
)
from archmodel.validation import validate_model

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/workspaces",
    tags=["workspaces"],
)

md5 = Md5Digest()


def get_store(request: Request) -> WorkspaceStore:
    return request.app.state.store


@contextmanager
def _workspace(workspace_id: str, store: WorkspaceStore) -> Iterator[Workspace]:
    """Yield the workspace while holding its lock, so one request at a time touches its Model."""
    with store.locked(workspace_id) as workspace:
        if workspace is None:
            raise HTTPException(status_code=404, detail=f"Workspace not found: {workspace_id}")
        yield workspace


def _parent(workspace: Workspace, element_id: str, kind):
    element = workspace.model.get_element(element_id)
    if not isinstance(element, kind):
        raise HTTPException(
            status_code=404, detail=f"{kind.kind_tag} not found: {element_id}"
        )
    return element


def _created(element) -> CreatedResponse:
    return CreatedResponse(id=element.id, canonical_name=element.canonical_name)


@router.post("", response_model=CreatedResponse, status_code=201)
def create_workspace(request: CreateWorkspaceRequest, store: WorkspaceStore = Depends(get_store)):
    workspace_id = store.create(request.name, request.description)
    logger.info("[API] created workspace %s (%s)", workspace_id, request.name)
    return CreatedResponse(id=workspace_id)


@router.get("/{workspace_id}", response_model=WorkspaceResponse)
def get_workspace(workspace_id: str, store: WorkspaceStore = Depends(get_store)):
    with _workspace(workspace_id, store) as workspace:
        return WorkspaceResponse(
            id=workspace_id,
            digest=md5.generate(workspace_to_json(workspace)),
            workspace=serialize_workspace(workspace),
        )


@router.get("/{workspace_id}/validation")
def validate_workspace(workspace_id: str, store: WorkspaceStore = Depends(get_store)):
    with _workspace(workspace_id, store) as workspace:
        return validate_model(workspace.model).to_dict()


@router.post("/{workspace_id}/people", response_model=CreatedResponse)
def add_person(
    workspace_id: str, request: AddElementRequest, store: WorkspaceStore = Depends(get_store)
):
    with _workspace(workspace_id, store) as workspace:
        try:
            person = workspace.model.add_person(
                request.name, request.description, Location(request.location)
            )
        except InvalidArgumentError as e:
            raise HTTPException(status_code=422, detail=str(e))
        return _created(person)


@router.post("/{workspace_id}/software-systems", response_model=CreatedResponse)
def add_software_system(
    workspace_id: str, request: AddElementRequest, store: WorkspaceStore = Depends(get_store)
):
    with _workspace(workspace_id, store) as workspace:
        try:
            software_system = workspace.model.add_software_system(
                request.name, request.description, Location(request.location)
            )
        except InvalidArgumentError as e:
            raise HTTPException(status_code=422, detail=str(e))
        return _created(software_system)


@router.post(
    "/{workspace_id}/software-systems/{element_id}/containers",
    response_model=CreatedResponse,
)
def add_container(
    workspace_id: str,
    element_id: str,
    request: AddContainerRequest,
    store: WorkspaceStore = Depends(get_store),
):
    with _workspace(workspace_id, store) as workspace:
        software_system = _parent(workspace, element_id, SoftwareSystem)
        try:
            container = software_system.add_container(
                request.name, request.description, request.technology
            )
        except InvalidArgumentError as e:
            raise HTTPException(status_code=422, detail=str(e))
        return _created(container)


@router.post(
    "/{workspace_id}/containers/{element_id}/components",
    response_model=CreatedResponse,
)
def add_component(
    workspace_id: str,
    element_id: str,
    request: AddComponentRequest,
    store: WorkspaceStore = Depends(get_store),
):
    with _workspace(workspace_id, store) as workspace:
        container = _parent(workspace, element_id, Container)
        try:
            component = container.add_component(
                request.name, request.description, request.technology, request.type
            )
        except InvalidArgumentError as e:
            raise HTTPException(status_code=422, detail=str(e))
        return _created(component)


@router.post("/{workspace_id}/relationships", response_model=CreatedResponse)
def add_relationship(
    workspace_id: str, request: AddRelationshipRequest, store: WorkspaceStore = Depends(get_store)
):
    with _workspace(workspace_id, store) as workspace:
        model = workspace.model
        source = model.get_element(request.source_id)
        destination = model.get_element(request.destination_id)
        if source is None or destination is None:
            missing = request.source_id if source is None else request.destination_id
            raise HTTPException(status_code=404, detail=f"Element not found: {missing}")

        try:
            relationship = model.add_relationship(
                source,
                destination,
                request.description,
                request.technology,
                InteractionStyle(request.interaction_style),
            )
        except InvalidArgumentError as e:
            raise HTTPException(status_code=422, detail=str(e))

        if relationship is None:
            return CreatedResponse()
        return CreatedResponse(id=relationship.id)


@router.delete("/{workspace_id}/elements/{element_id}", status_code=204)
def delete_element(
    workspace_id: str, element_id: str, store: WorkspaceStore = Depends(get_store)
):
    with _workspace(workspace_id, store) as workspace:
        removed = workspace.model.remove_element(element_id)
    logger.info("[API] delete %s in %s: %s", element_id, workspace_id, "removed" if removed else "absent")
    return Response(status_code=204)
