"""Configuration models for StudyPlan CLI."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

OUTPUT_FORMATS = ("pretty", "table", "json", "yaml")


class StorageConfig(BaseModel):
    """Task file configuration."""

    db_path: str | None = Field(
        default=None, description="Task file path (defaults to the user data dir)"
    )
    strict_load: bool = Field(
        default=False, description="Abort loading on a malformed record"
    )


class OutputConfig(BaseModel):
    """Output configuration."""

    format: str = Field(default="pretty")

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        if v not in OUTPUT_FORMATS:
            raise ValueError(f"format must be one of: {', '.join(OUTPUT_FORMATS)}")
        return v


class PlannerConfig(BaseModel):
    """Daily planner configuration."""

    default_minutes: int | None = Field(
        default=None, description="Budget used when --minutes is omitted"
    )


class AppConfig(BaseModel):
    """Main StudyPlan configuration"""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    planner: PlannerConfig = Field(default_factory=PlannerConfig)
