"""Type aliases used across bigx."""

from __future__ import annotations

from typing import Any, Literal

AttributeValue = dict[str, Any]
Item = dict[str, AttributeValue]
Uint64Mode = Literal["wrap", "saturate", "fault"]
