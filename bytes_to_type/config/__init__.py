"""Configuration package for bytes-to-type."""

# Re-export enums
from bytes_to_type.config.enums import ScalarType, OutputFormat, resolve_scalar_type

# Re-export models
from bytes_to_type.config.models import ConversionJob

# Re-export sources
from bytes_to_type.config.protocols import ConfigSource, CURRENT_SCHEMA_VERSION
from bytes_to_type.config.yaml_source import YAMLConfigSource

# Re-export loader
from bytes_to_type.config.loader import BatchLoader

__all__ = [
    # Enums
    "ScalarType",
    "OutputFormat",
    "resolve_scalar_type",
    # Models
    "ConversionJob",
    # Sources
    "ConfigSource",
    "CURRENT_SCHEMA_VERSION",
    "YAMLConfigSource",
    # Loader
    "BatchLoader",
]
