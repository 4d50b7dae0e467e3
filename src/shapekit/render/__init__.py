"""
shapekit.render - renderer lookup and editing contracts for presentation layers.

## Public API
- Renderer - protocol ``(configuration, value, on_change, context) -> Any``.
- RendererRegistry - descriptor id -> renderer, with an unsupported fallback.
- RenderContext - passed to renderers so composites can recurse.
- default_choices / default_choice_for - alternatives offered when editing ``any``.

## Import DAG discipline
- Depends only on stdlib and shapekit.core.
"""

from __future__ import annotations

from .registry import (
    RenderContext,
    Renderer,
    RendererRegistry,
    UnsupportedRenderer,
    default_choice_for,
    default_choices,
)

__all__ = [
    "Renderer",
    "RenderContext",
    "RendererRegistry",
    "UnsupportedRenderer",
    "default_choices",
    "default_choice_for",
]
