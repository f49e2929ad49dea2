# Copyright (c) 2026 Hueguard
# SPDX-License-Identifier: MIT

"""
Tool output serializer for function-calling hosts.

Every response carries a ``metadata`` block::

    {
      "success": true,
      "data": { ...result.to_dict()... },
      "metadata": {
        "execution_time": 3,
        "tool": "check_contrast",
        "timestamp": "2026-01-01T00:00:00.000Z",
        "color_space_used": "sRGB",
        "accessibility_notes": [...],
        "recommendations": [...]
      }
    }

Errors replace ``data`` with ``error: {code, message, details?, suggestions?}``
and set ``success`` to false.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional, Sequence

from hueguard.runtime.serializers.base import SerializerFormat, dump

COLOR_SPACE = "sRGB"


def _timestamp() -> str:
    """UTC ISO-8601 timestamp with millisecond precision and a Z suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _metadata(tool: str, execution_time_ms: float) -> dict:
    return {
        "execution_time": execution_time_ms,
        "tool": tool,
        "timestamp": _timestamp(),
    }


def _payload(data: Any) -> Any:
    """Result records expose ``to_dict``; anything else is passed through."""
    to_dict = getattr(data, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    return data


def to_tool_output(
    tool: str,
    data: Any,
    *,
    execution_time_ms: float,
    accessibility_notes: Optional[Sequence[str]] = None,
    recommendations: Optional[Sequence[str]] = None,
    format: SerializerFormat = SerializerFormat.JSON,
) -> str:
    """Serialize a successful engine result as tool output JSON.

    Args:
        tool: Tool name reported in the metadata.
        data: A result record (anything with ``to_dict``) or a JSON-ready
            value.
        execution_time_ms: Time spent producing ``data``.
        accessibility_notes: Optional notes surfaced in the metadata.
        recommendations: Optional advice surfaced in the metadata.
        format: Output format (JSON or JSON_PRETTY).

    Returns:
        JSON string of the success envelope.
    """
    metadata = _metadata(tool, execution_time_ms)
    metadata["color_space_used"] = COLOR_SPACE
    if accessibility_notes is not None:
        metadata["accessibility_notes"] = list(accessibility_notes)
    if recommendations is not None:
        metadata["recommendations"] = list(recommendations)

    return dump(
        {
            "success": True,
            "data": _payload(data),
            "metadata": metadata,
        },
        format,
    )


def to_error_output(
    tool: str,
    code: str,
    message: str,
    *,
    execution_time_ms: float,
    details: Any = None,
    suggestions: Optional[Sequence[str]] = None,
    format: SerializerFormat = SerializerFormat.JSON,
) -> str:
    """Serialize a failure as tool output JSON.

    Args:
        tool: Tool name reported in the metadata.
        code: Machine-readable error code (e.g. ``"INVALID_COLOR"``).
        message: Human-readable description.
        execution_time_ms: Time spent before the failure.
        details: Optional JSON-ready context.
        suggestions: Optional fixes for the caller.
        format: Output format (JSON or JSON_PRETTY).
    """
    error: dict = {"code": code, "message": message}
    if details is not None:
        error["details"] = details
    if suggestions is not None:
        error["suggestions"] = list(suggestions)

    return dump(
        {
            "success": False,
            "error": error,
            "metadata": _metadata(tool, execution_time_ms),
        },
        format,
    )
