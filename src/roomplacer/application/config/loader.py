"""Room file loader with error reporting.

This module loads JSON room files and validates them against the
RoomConfiguration schema. File system problems, malformed JSON and schema
violations all surface as ConfigError with a category and enough detail
for the CLI to print an actionable message.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from roomplacer.application.config.schema import RoomConfiguration


class ConfigError(Exception):
    """Exception raised for room file errors.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, permission_denied,
            file_read_error, json_parse, validation)
        path: Path to the room file (if applicable)
        details: Additional error details (line/column for JSON, one entry
            per schema violation for validation)
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
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


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    Examples:
        >>> _format_json_path(("world", "max_x"))
        'world.max_x'
        >>> _format_json_path(("furniture", 0, "position", "x"))
        'furniture[0].position.x'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def _validation_details(error: PydanticValidationError) -> list[dict[str, Any]]:
    """Flatten Pydantic errors into path/message/value/error_type entries."""
    return [
        {
            "path": _format_json_path(err["loc"]) or "(root)",
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]


def _validation_message(details: list[dict[str, Any]]) -> str:
    lines = ["Room file validation failed:"]
    for detail in details:
        # Model-level errors carry the whole input; it is too noisy to echo
        value = detail.get("value")
        if value is not None and not isinstance(value, (dict, list)):
            lines.append(f"  - {detail['path']}: {detail['message']} (got: {value!r})")
        else:
            lines.append(f"  - {detail['path']}: {detail['message']}")
    return "\n".join(lines)


def _validate(data: Any, path: Path | None = None) -> RoomConfiguration:
    try:
        return RoomConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _validation_details(e)
        raise ConfigError(
            message=_validation_message(details),
            error_type="validation",
            path=path,
            details=details,
        ) from e


def load_config(path: Path) -> RoomConfiguration:
    """Load and validate a room configuration from a JSON file.

    Args:
        path: Path to the JSON room file

    Returns:
        A validated RoomConfiguration instance

    Raises:
        ConfigError: If the file cannot be read, parsed or validated. The
            error_type attribute tells which.

    Example:
        >>> from pathlib import Path
        >>> try:
        ...     config = load_config(Path("living-room.json"))
        ... except ConfigError as e:
        ...     print(f"Error: {e}")
        Error: Room file not found: living-room.json
    """
    if not path.exists():
        raise ConfigError(
            message=f"Room file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise ConfigError(
            message=f"Permission denied reading room file: {path}",
            error_type="permission_denied",
            path=path,
        ) from e
    except OSError as e:
        raise ConfigError(
            message=f"Error reading room file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        ) from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=(
                f"Invalid JSON in room file: {path} "
                f"(line {e.lineno}, column {e.colno}): {e.msg}"
            ),
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e

    return _validate(data, path)


def load_config_from_dict(data: dict[str, Any]) -> RoomConfiguration:
    """Load and validate a room configuration from a dictionary.

    Raises:
        ConfigError: If the data fails validation.
    """
    return _validate(data)
