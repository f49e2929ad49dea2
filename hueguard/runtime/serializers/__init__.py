# Copyright (c) 2026 Hueguard
# SPDX-License-Identifier: MIT

"""Serializers for engine results delivered as tool responses."""

from hueguard.runtime.serializers.base import SerializerFormat, dump
from hueguard.runtime.serializers.tool import to_error_output, to_tool_output

__all__ = [
    "SerializerFormat",
    "dump",
    "to_tool_output",
    "to_error_output",
]
