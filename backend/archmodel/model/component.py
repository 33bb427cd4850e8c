import inspect
from typing import TYPE_CHECKING, Optional

from . import tags
from .element import Element
from .errors import InvalidArgumentError

if TYPE_CHECKING:
    from .container import Container


def format_type_name(type_ref) -> Optional[str]:
    """
    Normalise the implementation type recorded on a component.

    Accepts None, a type name string, or a Python class (recorded as
    ``module.QualName``). Anything else is rejected.
    """
    if type_ref is None:
        return None
    if isinstance(type_ref, str):
        return type_ref
    if inspect.isclass(type_ref):
        return f"{type_ref.__module__}.{type_ref.__qualname__}"
    raise InvalidArgumentError(
        f"component type must be a class or a type name, not {type(type_ref).__name__}"
    )


class Component(Element):
    """A grouping of related functionality behind an interface, inside a container."""

    kind_tag = tags.COMPONENT

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.technology: Optional[str] = None
        self.type: Optional[str] = None
        self.size: Optional[int] = None

    @property
    def container(self) -> Optional["Container"]:
        return self.parent
