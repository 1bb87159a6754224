"""
Pydantic v2 schemas for request validation and response serialisation.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Tag types
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class TagTypeResponse(BaseModel):
    name: str
    attrs: list[str]
    has_handler: bool


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Parse / render
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class TagRequest(BaseModel):
    raw: str = Field(..., min_length=1, description="Tag text, e.g. 'image: photo.jpg alt: Sunset'")
    data: dict[str, Any] = Field(default_factory=dict)
    options: dict[str, Any] = Field(default_factory=dict)


# -----------------------------------------------------------------------------

class TagResponse(BaseModel):
    type: str
    value: str
    attrs: dict[str, str]
    data: dict[str, Any]
    options: dict[str, Any]


# -----------------------------------------------------------------------------

class ExpandRequest(BaseModel):
    text: str
    data: dict[str, Any] = Field(default_factory=dict)
    options: dict[str, Any] = Field(default_factory=dict)


# -----------------------------------------------------------------------------

class RenderResponse(BaseModel):
    output: str
