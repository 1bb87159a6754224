#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Tags router
===========
GET    /api/v1/tags/types     — registered tag types and their attributes
POST   /api/v1/tags/parse     — parse one tag into its parts
POST   /api/v1/tags/render    — parse and render one tag
POST   /api/v1/tags/expand    — expand every tag inside a piece of text
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request

from tagtext.core.config import Settings, get_settings
from tagtext.core.exceptions import InvalidRenderHandler, UndefinedTagType
from tagtext.schemas import (
    ExpandRequest,
    RenderResponse,
    TagRequest,
    TagResponse,
    TagTypeResponse,
)
from tagtext.services.tags import Renderer, Tag, TagEngine, TagParser, TagTypeRegistry

# -----------------------------------------------------------------------------

router = APIRouter(prefix="/tags", tags=["tags"])


def get_registry(request: Request) -> TagTypeRegistry:
    return request.app.state.tag_registry


# -----------------------------------------------------------------------------

@router.get("/types", response_model=list[TagTypeResponse])
async def list_types(registry: TagTypeRegistry = Depends(get_registry)):
    return [
        {"name": d.name, "attrs": list(d.attrs), "has_handler": d.handler is not None}
        for d in registry.definitions()
    ]


# -----------------------------------------------------------------------------

@router.post("/parse", response_model=TagResponse)
async def parse(data: TagRequest, registry: TagTypeRegistry = Depends(get_registry)):
    try:
        tag = TagParser(registry).parse(data.raw, data.data, data.options)
    except UndefinedTagType as exc:
        raise HTTPException(404, str(exc))
    return _tag_dict(tag)


# -----------------------------------------------------------------------------

@router.post("/render", response_model=RenderResponse)
async def render(data: TagRequest, registry: TagTypeRegistry = Depends(get_registry)):
    try:
        tag = TagParser(registry).parse(data.raw, data.data, data.options)
        output = Renderer(registry).render(tag)
    except UndefinedTagType as exc:
        raise HTTPException(404, str(exc))
    except InvalidRenderHandler as exc:
        raise HTTPException(422, str(exc))
    return {"output": output}


# -----------------------------------------------------------------------------

@router.post("/expand", response_model=RenderResponse)
async def expand(
    data: ExpandRequest,
    registry: TagTypeRegistry = Depends(get_registry),
    settings: Settings = Depends(get_settings),
):
    if len(data.text) > settings.max_text_length:
        raise HTTPException(
            413,
            f"Text exceeds {settings.max_text_length} characters",
        )
    engine = TagEngine(registry, strict=settings.tag_engine_strict)
    try:
        output = engine.expand(data.text, data.data, data.options)
    except UndefinedTagType as exc:
        raise HTTPException(404, str(exc))
    except InvalidRenderHandler as exc:
        raise HTTPException(422, str(exc))
    return {"output": output}


# -----------------------------------------------------------------------------

def _tag_dict(tag: Tag) -> dict:
    return {
        "type": tag.type,
        "value": tag.value,
        "attrs": dict(tag.attrs),
        "data": dict(tag.data),
        "options": dict(tag.options),
    }


# -----------------------------------------------------------------------------
