"""Protocol definitions for configuration sources."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ConfigSource(Protocol):
    """Protocol for batch configuration data sources.

    The BatchLoader depends on this abstraction rather than on a concrete
    file format. YAMLConfigSource is the shipped implementation.
    """

    def load(self) -> tuple[list[dict[str, Any]], int]:
        """Load batch configuration data from the source.

        Returns:
            Tuple of (jobs_data, schema_version) where:
            - jobs_data: List of job configuration dictionaries
            - schema_version: Schema version number declared by the source

        Raises:
            ConfigError: If configuration cannot be loaded or is invalid
        """
        ...

    @property
    def source_description(self) -> str:
        """Human-readable description of the config source.

        Returns:
            Description string for logging/error messages
            e.g., "YAML file: /path/to/batch.yaml"
        """
        ...


# Current supported schema version
CURRENT_SCHEMA_VERSION = 1
