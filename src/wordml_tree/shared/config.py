"""Configuration classes for WordprocessingML tree serialization.

This module provides configuration objects for the serializer and the logging
layer, plus an immutable aggregate used by the level-1 writer API.
"""

import json
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, List, Optional


class OutputFormat(Enum):
    """Supported output formats for tree serialization."""

    XML_STRING = "xml"
    XML_PRETTY = "xml_pretty"
    DICTIONARY = "dict"
    JSON = "json"
    JSON_PRETTY = "json_pretty"


@dataclass
class SerializationConfig:
    """Configuration options for serializing a node tree."""

    # XML formatting options
    xml_declaration: bool = False
    xml_encoding: str = "UTF-8"
    standalone: Optional[bool] = None
    xml_indent: str = "  "  # Two spaces for pretty printing

    # Tree handling options
    declare_namespaces: bool = False
    omit_empty_components: bool = True
    report_duplicate_properties: bool = True

    # Dictionary formatting options
    dict_attribute_prefix: str = "@"
    dict_text_key: str = "#text"

    # JSON formatting options
    json_indent: Optional[int] = 2
    json_ensure_ascii: bool = False
    json_sort_keys: bool = False

    def __post_init__(self) -> None:
        """Validate serialization configuration."""
        if not self.xml_encoding:
            raise ValueError("xml_encoding cannot be empty")
        if self.xml_indent.strip(" \t"):
            raise ValueError("xml_indent may only contain spaces and tabs")
        if not self.dict_attribute_prefix:
            raise ValueError("dict_attribute_prefix cannot be empty")
        if not self.dict_text_key:
            raise ValueError("dict_text_key cannot be empty")
        if self.dict_text_key.startswith(self.dict_attribute_prefix):
            raise ValueError("dict_text_key must not start with dict_attribute_prefix")
        if self.json_indent is not None and self.json_indent < 0:
            raise ValueError("json_indent must be >= 0 or None")


@dataclass
class LoggingConfig:
    """Logging settings applied by the writer API."""

    logging_level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    enable_correlation_tracking: bool = True
    log_serialization_summary: bool = True

    def __post_init__(self) -> None:
        """Validate logging configuration."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if self.logging_level not in valid_levels:
            raise ValueError(f"logging_level must be one of {valid_levels}")


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


_SECTIONS = ("serialization", "logging")


@dataclass(frozen=True)
class WriterConfig:
    """Immutable configuration for the writer API.

    Bundles serialization and logging settings. Thread-safe to share because
    the aggregate is frozen; use :meth:`override` to derive variants.
    """

    serialization: SerializationConfig = field(default_factory=SerializationConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    output_format: OutputFormat = OutputFormat.XML_STRING

    # Metadata
    version: str = "1.0.0"
    name: Optional[str] = None
    description: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate the complete writer configuration."""
        try:
            self.serialization.__post_init__()
            self.logging.__post_init__()
            self._validate_cross_section_dependencies()
        except ValueError as e:
            raise ConfigValidationError(str(e)) from e

    def _validate_cross_section_dependencies(self) -> None:
        """Validate dependencies between the configuration sections."""
        if (
            self.serialization.standalone is not None
            and not self.serialization.xml_declaration
        ):
            raise ConfigValidationError(
                "standalone requires xml_declaration to be enabled",
                field_name="serialization.standalone",
                suggestions=["Set serialization.xml_declaration=True",
                             "Leave serialization.standalone as None"]
            )

    def override(self, **kwargs: Any) -> "WriterConfig":
        """Create a new configuration with specific overrides.

        Args:
            **kwargs: Keyword arguments for configuration fields to override

        Returns:
            New WriterConfig instance with overrides applied

        Example:
            >>> config = WriterConfig()
            >>> new_config = config.override(
            ...     serialization__xml_declaration=True,
            ...     logging__logging_level="DEBUG"
            ... )
        """
        nested_overrides: Dict[str, Any] = {}
        for key, value in kwargs.items():
            if "__" in key:
                section, field_name = key.split("__", 1)
                if section not in _SECTIONS:
                    raise ConfigValidationError(
                        f"Unknown configuration section: {section}",
                        field_name=key,
                        suggestions=[f"Use one of {list(_SECTIONS)}"]
                    )
                nested_overrides.setdefault(section, {})[field_name] = value
            else:
                nested_overrides[key] = value

        new_fields: Dict[str, Any] = {}
        for section in _SECTIONS:
            current = getattr(self, section)
            if section in nested_overrides and isinstance(nested_overrides[section], dict):
                try:
                    new_fields[section] = replace(current, **nested_overrides[section])
                except (TypeError, ValueError) as e:
                    raise ConfigValidationError(str(e), field_name=section) from e

        for key, value in nested_overrides.items():
            if key not in new_fields:
                new_fields[key] = value

        return replace(self, **new_fields)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format.

        Returns:
            Dictionary representation of the configuration
        """
        def _dataclass_to_dict(obj: Any) -> Any:
            """Recursively convert dataclass to dict."""
            if hasattr(obj, "__dataclass_fields__"):
                return {
                    name: _dataclass_to_dict(getattr(obj, name))
                    for name in obj.__dataclass_fields__
                }
            if isinstance(obj, Enum):
                return obj.name
            if isinstance(obj, (list, tuple)):
                return [_dataclass_to_dict(item) for item in obj]
            if isinstance(obj, dict):
                return {key: _dataclass_to_dict(value) for key, value in obj.items()}
            return obj

        result = _dataclass_to_dict(self)
        if not isinstance(result, dict):
            raise ConfigValidationError("Configuration serialization failed")
        return result

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WriterConfig":
        """Create configuration from dictionary.

        Unknown keys are rejected so that typos do not silently fall back
        to defaults.

        Args:
            data: Dictionary containing configuration data

        Returns:
            WriterConfig instance created from dictionary
        """
        section_types = {
            "serialization": SerializationConfig,
            "logging": LoggingConfig,
        }
        values: Dict[str, Any] = {}
        for key, value in data.items():
            if key not in cls.__dataclass_fields__:
                raise ConfigValidationError(f"Unknown configuration key: {key}", field_name=key)
            if key in section_types:
                section_cls = section_types[key]
                unknown = set(value) - set(section_cls.__dataclass_fields__)
                if unknown:
                    raise ConfigValidationError(
                        f"Unknown {key} keys: {sorted(unknown)}", field_name=key
                    )
                try:
                    values[key] = section_cls(**value)
                except ValueError as e:
                    raise ConfigValidationError(str(e), field_name=key) from e
            elif key == "output_format" and isinstance(value, str):
                try:
                    values[key] = OutputFormat[value]
                except KeyError as e:
                    raise ConfigValidationError(
                        f"Unknown output format: {value}",
                        field_name=key,
                        suggestions=[member.name for member in OutputFormat]
                    ) from e
            else:
                values[key] = value
        return cls(**values)

    @classmethod
    def from_json(cls, json_str: str) -> "WriterConfig":
        """Create configuration from JSON string."""
        return cls.from_dict(json.loads(json_str))

    # Preset factory methods
    @classmethod
    def compact(cls) -> "WriterConfig":
        """Single-line XML fragment without declarations."""
        return cls(name="compact", description="Single-line XML fragment output")

    @classmethod
    def readable(cls) -> "WriterConfig":
        """Indented XML for inspection and debugging."""
        return cls(
            output_format=OutputFormat.XML_PRETTY,
            logging=LoggingConfig(logging_level="DEBUG"),
            name="readable",
            description="Indented XML output for inspection",
        )

    @classmethod
    def standalone_part(cls) -> "WriterConfig":
        """Well-formed standalone document with declaration and namespaces."""
        return cls(
            serialization=SerializationConfig(
                xml_declaration=True,
                standalone=True,
                declare_namespaces=True,
            ),
            name="standalone_part",
            description="Standalone XML with declaration and namespace declarations",
        )
