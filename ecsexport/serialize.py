"""
YAML encoding and file output for exported records.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from .errors import OutputError, SerializationError
from .models import ServiceRecord, TaskDefinitionRecord

logger = logging.getLogger(__name__)

Record = Union[ServiceRecord, TaskDefinitionRecord]


def to_yaml(data: Dict[str, Any]) -> str:
    """
    Encode a record dict as block-style YAML, keeping the API's key order.

    Raises:
        SerializationError: If a value has no YAML representation
    """
    try:
        return yaml.safe_dump(
            data,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )
    except yaml.YAMLError as e:
        raise SerializationError(f"failed to encode record as YAML: {e}") from e


def make_dir(path: Path) -> None:
    """Create a single directory level; fails if it already exists."""
    try:
        path.mkdir()
    except OSError as e:
        raise OutputError(f"failed to create a directory {path}: {e}") from e


def write_record(path: Path, record: Record, label: str) -> None:
    """
    Write a record to path as YAML.

    Args:
        path: Target file
        record: Service or task definition to encode
        label: Human-readable description used in error messages
    """
    try:
        text = to_yaml(record.to_dict())
    except SerializationError as e:
        raise SerializationError(f"failed to marshal {label}: {e}") from e

    try:
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise OutputError(f"failed to write yaml file of {label}: {e}") from e

    logger.debug(f"Wrote {path} ({len(text)} bytes)")
