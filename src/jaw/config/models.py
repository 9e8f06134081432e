from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Config models map YAML sections to typed reader settings.


class SourceConfig(BaseModel):
    # Line source selection; stdin is the interactive default.
    model_config = ConfigDict(extra="forbid")
    kind: Literal["stdin", "file"] = "stdin"
    path: str | None = None
    encoding: str = "utf-8"
    strip_newline: bool = True

    @model_validator(mode="after")
    def _require_path(self) -> SourceConfig:
        if self.kind == "file" and not self.path:
            raise ValueError("source.path is required when kind is 'file'")
        return self


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    sink: Literal["stdout", "jsonl"] = "stdout"
    stream: Literal["stdout", "stderr"] = "stderr"
    path: str | None = None

    @model_validator(mode="after")
    def _require_path(self) -> LoggingConfig:
        if self.sink == "jsonl" and not self.path:
            raise ValueError("logging.path is required when sink is 'jsonl'")
        return self


class ReaderConfig(BaseModel):
    # Top-level typed view of reader configuration.
    model_config = ConfigDict(extra="forbid")
    max_attempts: int = Field(default=3, ge=1)
    source: SourceConfig = Field(default_factory=SourceConfig)
    logging: LoggingConfig | None = None
