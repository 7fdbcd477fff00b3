"""
Schema Validation Components for graphwalk

This module provides JSON schema-based validation for settings documents.
Schemas are registered per settings section (for example ``driver`` or
``graph``) and instances are validated against the schema of their section,
collecting every violation rather than stopping at the first one.
"""

from typing import Any, Dict

from jsonschema import Draft202012Validator

from .base import ValidationResult


class SchemaValidator:
    """
    JSON Schema-based validator for settings sections.

    Attributes:
        schemas (Dict[str, Dict[str, Any]]): Dictionary mapping section
            names to their JSON schemas
    """

    def __init__(self):
        self.schemas: Dict[str, Dict[str, Any]] = {}

    def register_schema(self, section: str, schema: Dict[str, Any]) -> None:
        """
        Register a JSON schema for a settings section.

        Args:
            section: Name of the section this schema applies to
            schema: JSON schema definition as a dictionary

        Raises:
            jsonschema.exceptions.SchemaError: If ``schema`` is not a valid schema

        Example:
            >>> validator = SchemaValidator()
            >>> validator.register_schema(
            ...     "driver",
            ...     {"type": "object", "properties": {"auto": {"type": "boolean"}}},
            ... )
        """
        Draft202012Validator.check_schema(schema)
        self.schemas[section] = schema

    def validate(self, section: str, instance: Any) -> ValidationResult:
        """
        Validate an instance against the schema registered for ``section``.

        If no schema is registered for the section, a warning is included
        in the validation result and the instance is considered valid.

        Args:
            section: Name of the settings section
            instance: Decoded JSON document to validate

        Returns:
            ValidationResult containing every schema violation found
        """
        schema = self.schemas.get(section)
        if schema is None:
            return ValidationResult(
                is_valid=True,
                warnings=[f"No schema registered for section: {section}"],
                context={"section": section},
            )

        errors = []
        for error in sorted(Draft202012Validator(schema).iter_errors(instance), key=str):
            location = ".".join(str(part) for part in error.absolute_path) or "<root>"
            errors.append(f"{section}.{location}: {error.message}")

        return ValidationResult(
            is_valid=not errors,
            errors=errors,
            context={"section": section},
        )


__all__ = ["SchemaValidator"]
