"""JSON operation scripts: schema, validation and replay.

A script lists catalog operations to replay against a fresh catalog::

    {
      "operations": [
        {"op": "create_user", "name": "Alice", "mobile": "999"},
        {"op": "create_album", "title": "Hits", "artist": "A1"},
        {"op": "create_song", "title": "S1", "album": "Hits", "length": 200},
        {"op": "like_song", "mobile": "999", "title": "S1"},
        {"op": "most_popular_song"}
      ]
    }
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Union

import jsonschema

from .application.catalog_app import CatalogApplication
from .application.commands import (
    Command,
    CreateUserCommand,
    CreateArtistCommand,
    CreateAlbumCommand,
    CreateSongCommand,
    CreatePlaylistOnLengthCommand,
    CreatePlaylistOnNameCommand,
    FindPlaylistCommand,
    LikeSongCommand,
)
from .application.queries import (
    Query,
    MostPopularArtistQuery,
    MostPopularSongQuery,
    CatalogStatisticsQuery,
    PlaylistDetailsQuery,
)
from .exceptions import ScriptError

_TEXT = {"type": "string"}
_LENGTH = {"type": "integer"}


def _is_strict_integer(checker, instance) -> bool:
    # Draft 7 treats 200.0 as an integer; song lengths must be JSON integers
    return isinstance(instance, int) and not isinstance(instance, bool)


ScriptValidator = jsonschema.validators.extend(
    jsonschema.Draft7Validator,
    type_checker=jsonschema.Draft7Validator.TYPE_CHECKER.redefine("integer", _is_strict_integer),
)

# Required fields per operation
OPERATION_FIELDS: Dict[str, Dict[str, Dict[str, Any]]] = {
    "create_user": {"name": _TEXT, "mobile": _TEXT},
    "create_artist": {"name": _TEXT},
    "create_album": {"title": _TEXT, "artist": _TEXT},
    "create_song": {"title": _TEXT, "album": _TEXT, "length": _LENGTH},
    "create_playlist_on_length": {"mobile": _TEXT, "title": _TEXT, "length": _LENGTH},
    "create_playlist_on_name": {
        "mobile": _TEXT,
        "title": _TEXT,
        "songs": {"type": "array", "items": _TEXT},
    },
    "find_playlist": {"mobile": _TEXT, "title": _TEXT},
    "like_song": {"mobile": _TEXT, "title": _TEXT},
    "most_popular_artist": {},
    "most_popular_song": {},
    "statistics": {},
    "playlist_details": {"title": _TEXT},
}

SCRIPT_SCHEMA = {
    "type": "object",
    "required": ["operations"],
    "additionalProperties": False,
    "properties": {
        "operations": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["op"],
                "properties": {
                    "op": {
                        "type": "string",
                        "enum": sorted(OPERATION_FIELDS),
                        "description": "Catalog operation to run"
                    },
                    "description": {"type": "string"},
                },
                "allOf": [
                    {
                        "if": {
                            "properties": {"op": {"const": op}},
                            "required": ["op"]
                        },
                        "then": {
                            "required": sorted(op_fields),
                            "properties": op_fields,
                        }
                    }
                    for op, op_fields in OPERATION_FIELDS.items()
                ]
            }
        }
    }
}


Operation = Union[Command, Query]

_BUILDERS: Dict[str, Callable[[Dict[str, Any]], Operation]] = {
    "create_user": lambda o: CreateUserCommand(name=o["name"], mobile=o["mobile"]),
    "create_artist": lambda o: CreateArtistCommand(name=o["name"]),
    "create_album": lambda o: CreateAlbumCommand(title=o["title"], artist_name=o["artist"]),
    "create_song": lambda o: CreateSongCommand(title=o["title"], album_title=o["album"], length=o["length"]),
    "create_playlist_on_length": lambda o: CreatePlaylistOnLengthCommand(
        mobile=o["mobile"], title=o["title"], length=o["length"]
    ),
    "create_playlist_on_name": lambda o: CreatePlaylistOnNameCommand(
        mobile=o["mobile"], title=o["title"], song_titles=tuple(o["songs"])
    ),
    "find_playlist": lambda o: FindPlaylistCommand(mobile=o["mobile"], title=o["title"]),
    "like_song": lambda o: LikeSongCommand(mobile=o["mobile"], song_title=o["title"]),
    "most_popular_artist": lambda o: MostPopularArtistQuery(),
    "most_popular_song": lambda o: MostPopularSongQuery(),
    "statistics": lambda o: CatalogStatisticsQuery(),
    "playlist_details": lambda o: PlaylistDetailsQuery(title=o["title"]),
}


@dataclass
class OperationOutcome:
    """What happened when one script operation ran."""
    index: int
    op: str
    success: bool
    message: str = ""
    error_kind: str = ""
    data: Any = None
    events: List[str] = field(default_factory=list)


def validate_script_json(script_data: Any) -> List[str]:
    """Validate a parsed script.

    Returns:
        List of validation error messages, empty when the script is valid
    """
    validator = ScriptValidator(SCRIPT_SCHEMA)
    errors = sorted(validator.iter_errors(script_data), key=lambda e: list(e.absolute_path))
    messages = []
    for error in errors:
        path = " -> ".join(str(p) for p in error.absolute_path) if error.absolute_path else "root"
        messages.append(f"Validation error at {path}: {error.message}")
    return messages


def load_script(file_path: Path) -> List[Dict[str, Any]]:
    """Read and validate a script file, returning its operations.

    Raises:
        ScriptError: If the file cannot be read, parsed or validated
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            script_data = json.load(f)
    except json.JSONDecodeError as e:
        raise ScriptError(f"JSON parsing error: {e.msg} at line {e.lineno}, column {e.colno}") from e
    except OSError as e:
        raise ScriptError(f"Error reading file: {e}") from e

    errors = validate_script_json(script_data)
    if errors:
        raise ScriptError("\n".join(errors))
    return script_data["operations"]


def build_operation(operation: Dict[str, Any]) -> Operation:
    """Turn one validated script entry into a command or query."""
    try:
        builder = _BUILDERS[operation["op"]]
    except KeyError:
        raise ScriptError(f"Unknown operation: {operation.get('op')!r}") from None
    return builder(operation)


def run_operations(
    app: CatalogApplication,
    operations: List[Dict[str, Any]],
    stop_on_error: bool = False,
) -> List[OperationOutcome]:
    """Replay operations in order against ``app``."""
    outcomes = []
    for index, operation in enumerate(operations, start=1):
        message = build_operation(operation)
        if isinstance(message, Command):
            result = app.execute(message)
            outcome = OperationOutcome(
                index=index,
                op=operation["op"],
                success=result.success,
                message=result.message or "; ".join(result.errors),
                error_kind=result.error_kind or "",
                data=result.result_data,
                events=[type(event).__name__ for event in result.events],
            )
        else:
            result = app.ask(message)
            outcome = OperationOutcome(
                index=index,
                op=operation["op"],
                success=result.success,
                message=result.message or "; ".join(result.errors),
                error_kind=result.error_kind or "",
                data=result.data,
            )
        outcomes.append(outcome)

        if stop_on_error and not outcome.success:
            break

    return outcomes
