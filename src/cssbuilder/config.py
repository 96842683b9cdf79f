from __future__ import annotations

import os
from dataclasses import dataclass

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
OUTPUT_FORMATS = ("text", "json")


@dataclass(frozen=True)
class CssBuilderConfig:
    log_level: str = "WARNING"
    output_format: str = "text"  # "text" or "json"

    @classmethod
    def from_env(cls) -> CssBuilderConfig:
        """Read CSSBUILDER_* environment variables, falling back to defaults."""
        defaults = cls()
        log_level = os.environ.get("CSSBUILDER_LOG_LEVEL", defaults.log_level).upper()
        if log_level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {log_level!r}")
        output_format = os.environ.get(
            "CSSBUILDER_OUTPUT_FORMAT", defaults.output_format
        ).lower()
        if output_format not in OUTPUT_FORMATS:
            raise ValueError(f"Unknown output format: {output_format!r}")
        return cls(log_level=log_level, output_format=output_format)
