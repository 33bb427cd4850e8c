from dataclasses import dataclass


class ArchModelError(Exception):
    """Base class for errors raised by the architecture model."""


class InvalidArgumentError(ArchModelError, ValueError):
    """Raised when an operation receives a structurally invalid argument."""


class ModelIntegrityError(ArchModelError, AssertionError):
    """Raised when a model invariant is found broken. Always a bug."""


@dataclass
class IntegrityIssue:
    code: str
    message: str
    object_id: str
