"""Configuration classes for the XML DOM facade.

This module provides configuration objects for the two external collaborators
the facade drives: the lxml document parser and the lxml XPath evaluator.
"""

import json
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class DocumentConfig:
    """Configuration for parsing raw input into a document tree."""

    # Entity and network handling
    resolve_entities: bool = False
    no_network: bool = True
    load_dtd: bool = False
    huge_tree: bool = False

    # Content shaping
    remove_blank_text: bool = False
    remove_comments: bool = False
    remove_pis: bool = False
    strip_cdata: bool = True

    # Error handling and limits
    recover: bool = False
    max_input_size_bytes: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate document configuration."""
        if self.max_input_size_bytes is not None and self.max_input_size_bytes <= 0:
            raise ValueError("max_input_size_bytes must be > 0 or None")

    def parser_options(self) -> Dict[str, Any]:
        """Keyword arguments for ``lxml.etree.XMLParser``."""
        return {
            "resolve_entities": self.resolve_entities,
            "no_network": self.no_network,
            "load_dtd": self.load_dtd,
            "huge_tree": self.huge_tree,
            "remove_blank_text": self.remove_blank_text,
            "remove_comments": self.remove_comments,
            "remove_pis": self.remove_pis,
            "strip_cdata": self.strip_cdata,
            "recover": self.recover,
        }


@dataclass(frozen=True)
class QueryConfig:
    """Configuration for compiling and evaluating XPath queries."""

    cache_size_limit: int = 128
    enable_regexp: bool = True
    smart_strings: bool = True

    def __post_init__(self) -> None:
        """Validate query configuration."""
        if self.cache_size_limit < 0:
            raise ValueError("cache_size_limit must be >= 0")
        # Attribute and text results are told apart by their smart-string flags
        if not self.smart_strings:
            raise ValueError("smart_strings must be enabled for node classification")


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


_COMPONENTS = ("document", "query")


@dataclass(frozen=True)
class FacadeConfig:
    """Complete configuration for the facade.

    Immutable, so a single instance can be shared by every element derived
    from a document and by concurrent readers.
    """

    document: DocumentConfig = field(default_factory=DocumentConfig)
    query: QueryConfig = field(default_factory=QueryConfig)

    # Metadata
    version: str = "1.0.0"
    name: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate the complete configuration."""
        try:
            self.document.__post_init__()
            self.query.__post_init__()
        except ValueError as e:
            raise ConfigValidationError(str(e)) from e

    def override(self, **kwargs: Any) -> "FacadeConfig":
        """Create a new configuration with specific overrides.

        Args:
            **kwargs: Fields to override; component fields use the
                ``component__field`` notation

        Returns:
            New FacadeConfig instance with overrides applied

        Example:
            >>> config = FacadeConfig()
            >>> new_config = config.override(
            ...     document__recover=True,
            ...     query__cache_size_limit=16
            ... )
        """
        nested_overrides: Dict[str, Any] = {}
        for key, value in kwargs.items():
            if "__" in key:
                component, field_name = key.split("__", 1)
                if component not in _COMPONENTS:
                    raise ConfigValidationError(
                        f"Unknown configuration component: {component}",
                        field_name=key,
                        suggestions=[f"Use one of {list(_COMPONENTS)}"],
                    )
                nested_overrides.setdefault(component, {})[field_name] = value
            else:
                nested_overrides[key] = value

        new_fields: Dict[str, Any] = {}
        for component in _COMPONENTS:
            current_config = getattr(self, component)
            overrides = nested_overrides.pop(component, None)
            if isinstance(overrides, dict):
                try:
                    new_fields[component] = replace(current_config, **overrides)
                except ValueError as e:
                    raise ConfigValidationError(str(e), field_name=component) from e
            elif overrides is not None:
                new_fields[component] = overrides
            else:
                new_fields[component] = current_config

        # Remaining keys are top-level metadata fields
        new_fields.update(nested_overrides)

        return replace(self, **new_fields)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        def _dataclass_to_dict(obj: Any) -> Any:
            if hasattr(obj, "__dataclass_fields__"):
                return {
                    name: _dataclass_to_dict(getattr(obj, name))
                    for name in obj.__dataclass_fields__
                }
            if isinstance(obj, (list, tuple, set)):
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
    def from_dict(cls, data: Dict[str, Any]) -> "FacadeConfig":
        """Create configuration from dictionary.

        Unknown keys are rejected so that typos do not silently fall back to
        defaults.

        Args:
            data: Dictionary containing configuration data

        Returns:
            FacadeConfig instance created from dictionary
        """
        def _dict_to_dataclass(data_dict: Dict[str, Any], target_class: type) -> Any:
            known_fields = target_class.__dataclass_fields__
            unknown = sorted(set(data_dict) - set(known_fields))
            if unknown:
                raise ConfigValidationError(
                    f"Unknown configuration fields for {target_class.__name__}: "
                    f"{', '.join(unknown)}",
                    field_name=unknown[0],
                )

            field_values: Dict[str, Any] = {}
            for field_name, field_info in known_fields.items():
                if field_name not in data_dict:
                    continue
                value = data_dict[field_name]
                if hasattr(field_info.type, "__dataclass_fields__"):
                    value = _dict_to_dataclass(value, field_info.type)
                field_values[field_name] = value

            try:
                return target_class(**field_values)
            except ValueError as e:
                raise ConfigValidationError(str(e)) from e

        result = _dict_to_dataclass(data, cls)
        if not isinstance(result, cls):
            raise ConfigValidationError(f"Failed to deserialize to {cls.__name__}")
        return result

    @classmethod
    def from_json(cls, json_str: str) -> "FacadeConfig":
        """Create configuration from JSON string."""
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ConfigValidationError(f"Invalid configuration JSON: {e}") from e
        if not isinstance(data, dict):
            raise ConfigValidationError("Configuration JSON must be an object")
        return cls.from_dict(data)

    # Preset factory methods
    @classmethod
    def secure(cls) -> "FacadeConfig":
        """Preset for untrusted input: no entities, no network, no DTD."""
        return cls(name="secure")

    @classmethod
    def lenient(cls) -> "FacadeConfig":
        """Preset that lets the parser recover from malformed markup."""
        return cls(
            document=DocumentConfig(recover=True),
            name="lenient",
        )

    @classmethod
    def trusted_input(cls) -> "FacadeConfig":
        """Preset for trusted documents that rely on DTD entities or are very large."""
        return cls(
            document=DocumentConfig(
                resolve_entities=True,
                load_dtd=True,
                huge_tree=True,
            ),
            name="trusted_input",
        )
