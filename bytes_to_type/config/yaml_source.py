"""YAML configuration source for bytes-to-type."""

from pathlib import Path
from typing import Any

import yaml

from bytes_to_type.config.protocols import CURRENT_SCHEMA_VERSION
from bytes_to_type.exceptions import YAMLConfigError


class YAMLConfigSource:
    """Load batch configuration from YAML files.

    Implements the ConfigSource protocol for YAML file loading.

    Attributes:
        config_path: Path to the YAML configuration file
    """

    def __init__(self, config_path: Path) -> None:
        """Initialize the YAML config source.

        Args:
            config_path: Path to the YAML configuration file

        Raises:
            YAMLConfigError: If the file does not exist
        """
        self._config_path = config_path
        if not config_path.exists():
            raise YAMLConfigError(f"Configuration file not found: {config_path}")
        if not config_path.is_file():
            raise YAMLConfigError(f"Configuration path is not a file: {config_path}")

    @property
    def config_path(self) -> Path:
        return self._config_path

    @property
    def source_description(self) -> str:
        """Human-readable description of the config source."""
        return f"YAML file: {self._config_path}"

    def load(self) -> tuple[list[dict[str, Any]], int]:
        """Load and parse the YAML configuration file.

        Returns:
            Tuple of (jobs_data, schema_version)

        Raises:
            YAMLConfigError: If YAML parsing fails or structure is invalid
        """
        try:
            with open(self._config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            error_msg = f"Failed to parse YAML configuration: {e}"
            if hasattr(e, 'problem_mark') and e.problem_mark is not None:
                mark = e.problem_mark
                error_msg += f" (line {mark.line + 1}, column {mark.column + 1})"
            raise YAMLConfigError(error_msg) from e

        if data is None:
            raise YAMLConfigError("Configuration file is empty")

        if not isinstance(data, dict):
            raise YAMLConfigError(
                f"Configuration must be a YAML mapping, got {type(data).__name__}"
            )

        return self._extract_config(data)

    def _extract_config(self, data: dict[str, Any]) -> tuple[list[dict[str, Any]], int]:
        """Extract the jobs list and schema version from parsed YAML.

        Args:
            data: Parsed YAML data as a dictionary

        Returns:
            Tuple of (jobs_data, schema_version)

        Raises:
            YAMLConfigError: If required sections are missing or malformed
        """
        schema_version = data.get("schema_version", CURRENT_SCHEMA_VERSION)
        if isinstance(schema_version, bool) or not isinstance(schema_version, int):
            raise YAMLConfigError(
                f"'schema_version' must be an integer, got {type(schema_version).__name__}"
            )
        if schema_version < 1:
            raise YAMLConfigError(f"'schema_version' must be at least 1, got {schema_version}")
        if schema_version > CURRENT_SCHEMA_VERSION:
            raise YAMLConfigError(
                f"Schema version {schema_version} is not supported. "
                f"Maximum supported version is {CURRENT_SCHEMA_VERSION}. "
                "Please upgrade bytes-to-type."
            )

        if "jobs" not in data:
            raise YAMLConfigError("Missing required 'jobs' section in configuration")

        jobs = data["jobs"]
        if not isinstance(jobs, list):
            raise YAMLConfigError(f"'jobs' must be a list, got {type(jobs).__name__}")

        for index, job in enumerate(jobs, start=1):
            if not isinstance(job, dict):
                raise YAMLConfigError(f"Job {index} must be a mapping, got {type(job).__name__}")

        return jobs, schema_version
