"""Loading of blueprints configuration files.

A configuration file is a JSON object validated against
BlueprintsConfiguration. Every failure surfaces as a ConfigError whose
``error_type`` says which stage failed.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from blueprints.application.config.schemas import BlueprintsConfiguration


class ConfigError(Exception):
    """Raised when a configuration cannot be read or validated.

    Attributes:
        message: Human-readable description.
        error_type: One of file_not_found, file_read_error, json_parse,
            validation.
        path: Configuration file, when loading from disk.
        details: Per-problem dictionaries (JSON position or field errors).
    """

    def __init__(
        self,
        message: str,
        error_type: str,
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _validate(data: Any, path: Path | None = None) -> BlueprintsConfiguration:
    try:
        return BlueprintsConfiguration.model_validate(data)
    except PydanticValidationError as e:
        # Config models are flat objects, so a dotted location is enough
        details = [
            {
                "path": ".".join(str(part) for part in err["loc"]),
                "message": err["msg"],
                "value": err.get("input"),
            }
            for err in e.errors()
        ]
        lines = ["Configuration validation failed:"]
        lines.extend(f"  - {d['path']}: {d['message']}" for d in details)
        raise ConfigError("\n".join(lines), "validation", path, details) from e


def load_config(path: Path) -> BlueprintsConfiguration:
    """Load and validate a configuration from a JSON file.

    Raises:
        ConfigError: If the file is missing, unreadable, not JSON, or does
            not match the schema.
    """
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}", "file_not_found", path)

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Invalid JSON in config file: {path} (line {e.lineno}): {e.msg}",
            "json_parse",
            path,
            [{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e
    except OSError as e:
        raise ConfigError(
            f"Error reading config file: {path}: {e}", "file_read_error", path
        ) from e

    return _validate(data, path)


def load_config_from_dict(data: dict[str, Any]) -> BlueprintsConfiguration:
    """Validate an in-memory configuration.

    Raises:
        ConfigError: If the data does not match the schema.
    """
    return _validate(data)
