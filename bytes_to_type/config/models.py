"""Pydantic models for bytes-to-type batch configuration."""

from pathlib import Path
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from bytes_to_type.config.enums import OutputFormat, ScalarType
from bytes_to_type.config.enums import resolve_scalar_type
from bytes_to_type.exceptions import UnsupportedScalarTypeError


class ConversionJob(BaseModel):
    """One file-to-scalars conversion in a batch."""

    model_config = ConfigDict(populate_by_name=True)

    input: Path = Field(..., description="File whose bytes are converted")
    scalar_type: ScalarType = Field(..., alias="type", description="Target scalar type, e.g. 'u32'")
    offset: int = Field(0, ge=0, description="First byte of the window to convert")
    length: int | None = Field(None, ge=0, description="Window length in bytes, defaults to rest of file")
    output: Path | None = Field(None, description="Destination file, stdout when omitted")
    format: OutputFormat = OutputFormat.TEXT

    @field_validator("scalar_type", mode="before")
    @classmethod
    def validate_scalar_type(cls, value) -> ScalarType:
        try:
            return resolve_scalar_type(value)
        except UnsupportedScalarTypeError:
            raise ValueError(f"Invalid scalar type: {value}")

    @field_validator("format", mode="before")
    @classmethod
    def validate_format(cls, value) -> OutputFormat:
        if isinstance(value, str):
            try:
                return OutputFormat(value.lower())
            except ValueError:
                raise ValueError(f"Invalid output format: {value}")
        return value

    @model_validator(mode="after")
    def validate_output_differs_from_input(self) -> Self:
        if self.output is not None and self.output == self.input:
            raise ValueError(f"Output path must differ from input path: {self.input}")
        return self

    def resolve_paths(self, base_dir: Path) -> "ConversionJob":
        """Return a copy with relative paths anchored at ``base_dir``."""
        updates: dict[str, Path] = {}
        if not self.input.is_absolute():
            updates["input"] = base_dir / self.input
        if self.output is not None and not self.output.is_absolute():
            updates["output"] = base_dir / self.output
        return self.model_copy(update=updates) if updates else self
