"""
Validation of built architecture models.
"""

from archmodel.validation.model_validator import (
    ModelValidator,
    ModelValidationResult,
    ValidationIssue,
    ValidationSeverity,
    validate_model,
    raise_on_errors,
)

__all__ = [
    "ModelValidator",
    "ModelValidationResult",
    "ValidationIssue",
    "ValidationSeverity",
    "validate_model",
    "raise_on_errors",
]
