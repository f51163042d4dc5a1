"""Common literal type aliases."""

from __future__ import annotations

from typing import Literal, TypeAlias

BuildStatus: TypeAlias = Literal["built", "skipped", "failed"]
