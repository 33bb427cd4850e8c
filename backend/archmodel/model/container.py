from typing import TYPE_CHECKING, List, Optional

from . import tags
from .component import Component
from .element import ChildRef, ParentElement

if TYPE_CHECKING:
    from .software_system import SoftwareSystem


class Container(ParentElement):
    """Something that executes code or hosts data, e.g. a service or a database."""

    kind_tag = tags.CONTAINER
    child_kind = Component

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.technology: Optional[str] = None

    @property
    def software_system(self) -> Optional["SoftwareSystem"]:
        return self.parent

    @property
    def components(self) -> List[Component]:
        return self.children

    def add_component(
        self,
        name: str,
        description: Optional[str] = None,
        technology: Optional[str] = None,
        type=None,
    ) -> Component:
        return self._model.add_component(self, name, description, technology, type)

    def get_component_with_name(self, name: Optional[str]) -> Optional[Component]:
        return self.find_child_by_name(name)

    def get_component_of_type(self, type_name: Optional[str]) -> Optional[Component]:
        return self.find_child_by_type(type_name)

    def remove_component(self, component_or_id: Optional[ChildRef]) -> bool:
        return self.remove_child(component_or_id)
