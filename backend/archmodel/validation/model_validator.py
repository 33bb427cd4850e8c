"""
Model Validator - reports problems in a built architecture model.

Catches issues like:
- Relationships left pointing at deleted elements
- Children no longer held by their parent
- Two children of one parent sharing a name after a rename
- Elements whose canonical names collide (and so compare equal)
- Self-referencing relationships
- Elements with no relationships at all
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional
from enum import Enum
from collections import defaultdict

from archmodel.model import Model, ModelIntegrityError, ParentElement


class ValidationSeverity(Enum):
    ERROR = "error"      # Model invariants are broken
    WARNING = "warning"  # Model is consistent but ambiguous
    INFO = "info"        # Suggestions for improvement


@dataclass
class ValidationIssue:
    severity: ValidationSeverity
    code: str
    message: str
    element_id: Optional[str] = None
    suggestion: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "severity": self.severity.value,
            "code": self.code,
            "message": self.message,
            "element_id": self.element_id,
            "suggestion": self.suggestion,
        }


@dataclass
class ModelValidationResult:
    is_valid: bool
    issues: List[ValidationIssue] = field(default_factory=list)
    stats: Dict[str, int] = field(default_factory=dict)

    @property
    def error_count(self) -> int:
        return sum(1 for i in self.issues if i.severity == ValidationSeverity.ERROR)

    @property
    def warning_count(self) -> int:
        return sum(1 for i in self.issues if i.severity == ValidationSeverity.WARNING)

    @property
    def info_count(self) -> int:
        return sum(1 for i in self.issues if i.severity == ValidationSeverity.INFO)

    def to_dict(self) -> dict:
        return {
            "is_valid": self.is_valid,
            "error_count": self.error_count,
            "warning_count": self.warning_count,
            "info_count": self.info_count,
            "issues": [i.to_dict() for i in self.issues],
            "stats": self.stats,
        }

    def get_summary(self) -> str:
        status = "Valid" if self.is_valid else "Invalid"
        return (
            f"{status} | Errors: {self.error_count}, "
            f"Warnings: {self.warning_count}, Info: {self.info_count}"
        )


class ModelValidator:
    """
    Usage:
        result = ModelValidator().validate(workspace.model)
        if not result.is_valid:
            for issue in result.issues:
                print(f"[{issue.severity.value}] {issue.message}")
    """

    def __init__(self, strict_mode: bool = False):
        self.strict_mode = strict_mode

    def validate(self, model: Model) -> ModelValidationResult:
        issues: List[ValidationIssue] = []

        issues.extend(self._check_integrity(model))
        issues.extend(self._check_duplicate_child_names(model))
        issues.extend(self._check_canonical_name_collisions(model))
        issues.extend(self._check_self_loops(model))
        issues.extend(self._check_unconnected_elements(model))

        has_errors = any(i.severity == ValidationSeverity.ERROR for i in issues)
        has_warnings = any(i.severity == ValidationSeverity.WARNING for i in issues)

        is_valid = not has_errors
        if self.strict_mode:
            is_valid = not has_errors and not has_warnings

        return ModelValidationResult(
            is_valid=is_valid,
            issues=issues,
            stats=self._calculate_stats(model),
        )

    def _check_integrity(self, model: Model) -> List[ValidationIssue]:
        return [
            ValidationIssue(
                severity=ValidationSeverity.ERROR,
                code=issue.code,
                message=issue.message,
                element_id=issue.object_id,
            )
            for issue in model.find_integrity_issues()
        ]

    def _check_duplicate_child_names(self, model: Model) -> List[ValidationIssue]:
        issues = []
        for parent in model.elements:
            if not isinstance(parent, ParentElement):
                continue
            seen: Dict[str, int] = defaultdict(int)
            for child in parent.children:
                seen[child.name] += 1
            for name, count in seen.items():
                if count > 1:
                    issues.append(ValidationIssue(
                        severity=ValidationSeverity.ERROR,
                        code="DUPLICATE_CHILD_NAME",
                        message=f"'{name}' appears {count} times under {parent.canonical_name}",
                        element_id=parent.id,
                        suggestion="Rename one of the children",
                    ))
        return issues

    def _check_canonical_name_collisions(self, model: Model) -> List[ValidationIssue]:
        issues = []
        by_name: Dict[str, List[str]] = defaultdict(list)
        for element in model.elements:
            by_name[element.canonical_name].append(element.id)
        for canonical_name, ids in by_name.items():
            if len(ids) > 1:
                issues.append(ValidationIssue(
                    severity=ValidationSeverity.WARNING,
                    code="CANONICAL_NAME_COLLISION",
                    message=f"elements {', '.join(ids)} share canonical name {canonical_name} and compare equal",
                    element_id=ids[0],
                    suggestion="Give each element a distinct name",
                ))
        return issues

    def _check_self_loops(self, model: Model) -> List[ValidationIssue]:
        return [
            ValidationIssue(
                severity=ValidationSeverity.INFO,
                code="SELF_LOOP",
                message=f"relationship {r.id} starts and ends at the same element",
                element_id=r.source_id,
            )
            for r in model.relationships
            if r.source_id == r.destination_id
        ]

    def _check_unconnected_elements(self, model: Model) -> List[ValidationIssue]:
        connected = set()
        for r in model.relationships:
            connected.add(r.source_id)
            connected.add(r.destination_id)
        return [
            ValidationIssue(
                severity=ValidationSeverity.INFO,
                code="UNCONNECTED_ELEMENT",
                message=f"{element.canonical_name} has no relationships",
                element_id=element.id,
            )
            for element in model.elements
            if element.id not in connected
        ]

    def _calculate_stats(self, model: Model) -> Dict[str, int]:
        kind_counts: Dict[str, int] = defaultdict(int)
        for element in model.elements:
            kind_counts[element.kind_tag] += 1
        return {
            "elements": len(model.elements),
            "relationships": len(model.relationships),
            "people": kind_counts.get("Person", 0),
            "software_systems": kind_counts.get("Software System", 0),
            "containers": kind_counts.get("Container", 0),
            "components": kind_counts.get("Component", 0),
        }


def validate_model(model: Model, strict: bool = False) -> ModelValidationResult:
    return ModelValidator(strict_mode=strict).validate(model)


def raise_on_errors(model: Model) -> None:
    """Validate and raise ModelIntegrityError if any error-level issue is found."""
    result = validate_model(model)
    if not result.is_valid:
        error_messages = [
            f"[{i.code}] {i.message}"
            for i in result.issues
            if i.severity == ValidationSeverity.ERROR
        ]
        raise ModelIntegrityError(
            f"Model validation failed with {result.error_count} errors:\n" +
            "\n".join(error_messages)
        )
