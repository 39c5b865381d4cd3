from pydantic import BaseModel, Field, field_validator
from typing import Literal

from refcheck.exclusion.templates import default_template_names


class OutputConfig(BaseModel):
    format: Literal["table", "json"] = "table"
    fail_on_corrupted: bool = False


class RefcheckConfig(BaseModel):
    workers: int = Field(default=4, gt=0)
    exclude: list[str] = Field(default_factory=list)
    templates: list[str] = Field(default_factory=default_template_names)
    custom_templates: dict[str, list[str]] = Field(default_factory=dict)
    output: OutputConfig = Field(default_factory=OutputConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "info"
    log_format: Literal["text", "json"] = "text"

    @field_validator("custom_templates")
    @classmethod
    def validate_template_names(cls, v: dict[str, list[str]]) -> dict[str, list[str]]:
        for name in v:
            if not name.strip():
                raise ValueError("template name cannot be empty or whitespace")
        return v
