# Copyright (c) 2026 Hueguard
# SPDX-License-Identifier: MIT

"""
Response envelopes for tool hosts.

Wraps engine results in the success / error envelope a tool-calling host
returns to its client. The envelope never modifies result content.
"""

from hueguard.runtime.serializers import (
    SerializerFormat,
    to_error_output,
    to_tool_output,
)

__all__ = [
    "to_tool_output",
    "to_error_output",
    "SerializerFormat",
]
