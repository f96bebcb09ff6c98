"""
Pydantic models for join requests and results.

These schemas describe what goes into a join and what comes out of it,
so the CLI can validate input and emit the result as JSON.
"""

from pydantic import BaseModel, Field
from typing import List
from enum import Enum

LABEL_PREFIX = "Full path: "


class PathStyle(str, Enum):
    """Separator conventions supported by the joiner."""
    POSIX = "posix"
    WINDOWS = "windows"

    @property
    def separator(self) -> str:
        return "\\" if self is PathStyle.WINDOWS else "/"


class JoinRequest(BaseModel):
    """
    Ordered path segments to join under one path style.
    """

    segments: List[str] = Field(..., min_length=1, description="Path segments, in join order")
    style: PathStyle = Field(PathStyle.POSIX, description="Separator convention: posix or windows")


class JoinResult(BaseModel):
    """
    Outcome of a join.

    `path` is empty only when every input segment was empty.
    """

    segments: List[str] = Field(..., description="Segments as given in the request")
    style: PathStyle
    separator: str = Field(..., description="Separator used to build the path")
    path: str = Field(..., description="Joined and cleaned path")

    def label(self) -> str:
        """The line printed by the CLI."""
        return f"{LABEL_PREFIX}{self.path}"
