from typing import List, Optional

from . import tags
from .container import Container
from .element import ChildRef, ParentElement
from .person import Location


class SoftwareSystem(ParentElement):
    """Top-level system. Owns a set of uniquely named containers."""

    kind_tag = tags.SOFTWARE_SYSTEM
    child_kind = Container

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.location = Location.UNSPECIFIED

    @property
    def containers(self) -> List[Container]:
        return self.children

    def add_container(
        self, name: str, description: Optional[str] = None, technology: Optional[str] = None
    ) -> Container:
        return self._model.add_container(self, name, description, technology)

    def get_container_with_name(self, name: Optional[str]) -> Optional[Container]:
        return self.find_child_by_name(name)

    def remove_container(self, container_or_id: Optional[ChildRef]) -> bool:
        return self.remove_child(container_or_id)
