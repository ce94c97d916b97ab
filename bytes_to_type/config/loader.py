"""Batch configuration loader for bytes-to-type."""

import logging
from pathlib import Path
from typing import Iterable

from pydantic import ValidationError

from bytes_to_type.config.models import ConversionJob
from bytes_to_type.config.protocols import ConfigSource
from bytes_to_type.config.yaml_source import YAMLConfigSource
from bytes_to_type.exceptions import ConfigValidationError
from bytes_to_type.types import JobData

logger = logging.getLogger(__name__)


class BatchLoader:
    """Load and validate batch conversion jobs.

    Raw job dictionaries are parsed into ConversionJob models and their
    relative paths are anchored at ``base_dir``.

    Attributes:
        _jobs_data: Raw job configuration dictionaries
        _base_dir: Directory relative job paths are resolved against
    """

    def __init__(self, jobs_data: Iterable[JobData], *, base_dir: Path | None = None) -> None:
        """Initialize the batch loader.

        Args:
            jobs_data: Iterable of raw job configuration dictionaries
            base_dir: Directory for relative paths (current directory if None)
        """
        self._jobs_data = list(jobs_data)
        self._base_dir = base_dir or Path.cwd()

    @classmethod
    def from_source(cls, source: ConfigSource, *, base_dir: Path | None = None) -> "BatchLoader":
        """Create a loader from any ConfigSource."""
        jobs_data, schema_version = source.load()
        logger.debug(
            "Loaded %d jobs (schema v%d) from %s",
            len(jobs_data), schema_version, source.source_description,
        )
        return cls(jobs_data, base_dir=base_dir)

    @classmethod
    def from_yaml(cls, config_path: Path) -> "BatchLoader":
        """Create a loader from a YAML file; relative paths use its directory."""
        return cls.from_source(YAMLConfigSource(config_path), base_dir=config_path.parent)

    def load(self) -> list[ConversionJob]:
        """Return validated conversion jobs.

        Returns:
            List of ConversionJob objects with paths resolved

        Raises:
            ConfigValidationError: If any job entry is invalid
        """
        jobs = []
        for index, data in enumerate(self._jobs_data, start=1):
            try:
                job = ConversionJob.model_validate(data)
            except ValidationError as e:
                raise ConfigValidationError(f"Invalid job {index}: {data}", errors=e) from e
            jobs.append(job.resolve_paths(self._base_dir))
        return jobs
