from dataclasses import dataclass, field
from typing import Optional

from .model import Model


@dataclass
class Workspace:
    """A named wrapper around one Model, the unit handed to serializers."""

    name: str
    description: Optional[str] = None
    model: Model = field(default_factory=Model, repr=False)
