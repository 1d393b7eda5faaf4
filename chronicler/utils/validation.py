"""
Input validation for Chronicler.

Provides validators for:
- Stack capacities
- Capture specifications (property identifiers)
- Serialized waypoint entries
"""

from typing import Any, List, Sequence
from dataclasses import dataclass
import logging

from .error_handling import InvalidArgumentError

logger = logging.getLogger(__name__)


@dataclass
class ValidationError:
    """Validation error details"""
    field: str
    message: str
    code: str
    severity: str = "error"  # error, warning


class ValidationResult:
    """Result of validation operation"""

    def __init__(self):
        self.errors: List[ValidationError] = []
        self.warnings: List[ValidationError] = []

    @property
    def is_valid(self) -> bool:
        """Check if validation passed (no errors)"""
        return len(self.errors) == 0

    def add_error(self, field: str, message: str, code: str):
        """Add error to result"""
        self.errors.append(ValidationError(field, message, code, "error"))

    def add_warning(self, field: str, message: str, code: str):
        """Add warning to result"""
        self.warnings.append(ValidationError(field, message, code, "warning"))

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Append errors and warnings of another result"""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self

    def get_error_messages(self) -> List[str]:
        """Get list of error messages"""
        return [e.message for e in self.errors]

    def raise_if_invalid(self):
        """Raise InvalidArgumentError carrying every error message."""
        for warning in self.warnings:
            logger.warning(f"{warning.field}: {warning.message}")
        if not self.is_valid:
            raise InvalidArgumentError("; ".join(self.get_error_messages()))


class Validator:
    """Input validation helpers"""

    @staticmethod
    def validate_capacity(value: Any, field_name: str = "capacity") -> ValidationResult:
        """
        Validate a stack capacity.

        Args:
            value: Maximum number of waypoints
            field_name: Field name for error messages

        Returns:
            ValidationResult with errors if any
        """
        result = ValidationResult()

        # bool is an int subclass but never a meaningful capacity
        if isinstance(value, bool) or not isinstance(value, int):
            result.add_error(
                field_name,
                f"{field_name} must be an integer (got {value!r})",
                "CAPACITY_NOT_INT"
            )
        elif value < 1:
            result.add_error(
                field_name,
                f"{field_name} must be >= 1 (got {value})",
                "CAPACITY_TOO_SMALL"
            )

        return result

    @staticmethod
    def validate_capture_properties(
        properties: Any,
        field_name: str = "capture_properties"
    ) -> ValidationResult:
        """Validate a capture specification: a sequence of str/int identifiers"""
        result = ValidationResult()

        if isinstance(properties, (str, bytes)) or not isinstance(properties, Sequence):
            result.add_error(
                field_name,
                f"{field_name} must be a sequence of property identifiers",
                "NOT_A_SEQUENCE"
            )
            return result

        seen = set()
        for index, identifier in enumerate(properties):
            if isinstance(identifier, bool) or not isinstance(identifier, (str, int)):
                result.add_error(
                    f"{field_name}[{index}]",
                    f"Property identifier must be str or int (got {identifier!r})",
                    "INVALID_IDENTIFIER"
                )
                continue
            if identifier in seen:
                result.add_warning(
                    f"{field_name}[{index}]",
                    f"Duplicate property identifier {identifier!r}",
                    "DUPLICATE_IDENTIFIER"
                )
            seen.add(identifier)

        return result

    @staticmethod
    def validate_waypoint_data(data: Any, field_name: str = "waypoint") -> ValidationResult:
        """Validate the serialized form of a waypoint"""
        result = ValidationResult()

        if not isinstance(data, dict):
            result.add_error(field_name, f"{field_name} must be an object", "NOT_AN_OBJECT")
            return result

        name = data.get("name")
        if name is not None and not isinstance(name, str):
            result.add_error(f"{field_name}.name", "Waypoint name must be a string", "INVALID_NAME")

        properties = data.get("properties", [])
        if isinstance(properties, dict):
            return result
        if not isinstance(properties, list):
            result.add_error(
                f"{field_name}.properties",
                "Waypoint properties must be a list of [key, value] pairs or an object",
                "INVALID_PROPERTIES"
            )
            return result

        for index, pair in enumerate(properties):
            if not isinstance(pair, (list, tuple)) or len(pair) != 2:
                result.add_error(
                    f"{field_name}.properties[{index}]",
                    "Expected a [key, value] pair",
                    "INVALID_PAIR"
                )
            elif isinstance(pair[0], bool) or not isinstance(pair[0], (str, int)):
                result.add_error(
                    f"{field_name}.properties[{index}]",
                    f"Property identifier must be str or int (got {pair[0]!r})",
                    "INVALID_IDENTIFIER"
                )

        return result
