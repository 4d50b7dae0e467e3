"""
Renderer registry: the boundary between descriptors and a presentation layer.

Presentation layers (form widgets, CLIs, notebooks) implement ``Renderer`` callables
and register them by descriptor id. shapekit never renders anything itself; it only
guarantees that every descriptor has a stable ``id`` to look renderers up by and an
inspectable ``configuration`` to hand to them.

Contracts
- Lookup: ``RendererRegistry.get_renderer(id) -> Renderer``. Unknown ids resolve to an
  ``UnsupportedRenderer`` placeholder and log a warning.
- Editing: a renderer is called as ``renderer(configuration, value, on_change, context)``
  and eventually calls ``on_change(new_value)`` with a value the same descriptor
  accepts. This is best effort; validation stays an explicit, separate step.

Examples:
    >>> from shapekit.core.descriptors import StringType
    >>> from shapekit.render.registry import RendererRegistry
    >>> registry = RendererRegistry()
    >>> registry.register("string", lambda configuration, value, on_change, context: f"<input {value!r}>")
    >>> registry.render(StringType(), "hi", print)
    "<input 'hi'>"
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol

from shapekit.core.descriptors import (
    AnyType,
    BooleanType,
    Descriptor,
    FileType,
    ImageType,
    ListType,
    NumberType,
    ObjectType,
    StringType,
    UnionType,
)
from shapekit.core.errors import DescriptorError
from shapekit.core.kinds import DescriptorKind, kind_from_value
from shapekit.core.log import get_logger
from shapekit.core.typing import OnChange
from shapekit.core.validate import match_alternative

__all__ = [
    "Renderer",
    "RenderContext",
    "RendererRegistry",
    "UnsupportedRenderer",
    "default_choices",
    "default_choice_for",
]

logger = get_logger(__name__)


class Renderer(Protocol):
    """Presentation-layer callable for one descriptor id."""

    def __call__(
        self,
        configuration: Any,
        value: Any,
        on_change: OnChange,
        context: RenderContext,
    ) -> Any: ...


@dataclass(frozen=True)
class UnsupportedRenderer:
    """Placeholder returned for ids without a registered renderer."""

    descriptor_id: str

    def __call__(self, configuration: Any, value: Any, on_change: OnChange, context: RenderContext) -> str:
        return f"unsupported descriptor: {self.descriptor_id}"


@dataclass(frozen=True)
class RenderContext:
    """
    Handed to every renderer so composite renderers can recurse into children.

    Attributes:
        registry (RendererRegistry): Registry used for child lookups.
    """

    registry: RendererRegistry

    def get_renderer(self, descriptor_id: str | DescriptorKind) -> Renderer:
        return self.registry.get_renderer(descriptor_id)

    def render(self, descriptor: Descriptor, value: Any, on_change: OnChange) -> Any:
        return self.registry.render(descriptor, value, on_change)


class RendererRegistry:
    """
    Mapping from descriptor id to renderer.

    Args:
        renderers: Initial renderers keyed by descriptor id or DescriptorKind.

    Raises:
        DescriptorError: If a key is not a known descriptor id.
    """

    def __init__(self, renderers: Mapping[str | DescriptorKind, Renderer] | None = None) -> None:
        self._renderers: dict[DescriptorKind, Renderer] = {}
        for key, renderer in (renderers or {}).items():
            self.register(key, renderer)

    def register(self, descriptor_id: str | DescriptorKind, renderer: Renderer) -> None:
        """Register (or replace) the renderer for a descriptor id."""
        self._renderers[kind_from_value(descriptor_id)] = renderer

    def has_renderer(self, descriptor_id: str | DescriptorKind) -> bool:
        try:
            return kind_from_value(descriptor_id) in self._renderers
        except DescriptorError:
            return False

    def kinds(self) -> list[DescriptorKind]:
        """Registered kinds in registration order."""
        return list(self._renderers)

    def get_renderer(self, descriptor_id: str | DescriptorKind) -> Renderer:
        """
        Look up the renderer for a descriptor id.

        Returns:
            Renderer: Registered renderer, or an UnsupportedRenderer for unknown or
            unregistered ids.
        """
        try:
            kind = kind_from_value(descriptor_id)
        except DescriptorError:
            logger.warning("no renderer for unknown descriptor id %r", descriptor_id)
            return UnsupportedRenderer(str(descriptor_id))
        renderer = self._renderers.get(kind)
        if renderer is None:
            logger.warning("no renderer registered for descriptor id %r", kind.value)
            return UnsupportedRenderer(kind.value)
        return renderer

    def render(self, descriptor: Descriptor, value: Any, on_change: OnChange) -> Any:
        """Render ``value`` with the renderer registered for ``descriptor.id``."""
        renderer = self.get_renderer(descriptor.id)
        return renderer(descriptor.configuration, value, on_change, RenderContext(self))


def default_choices() -> tuple[Descriptor, ...]:
    """
    Ordered descriptors offered when editing a value typed as ``any``.

    Returns:
        tuple[Descriptor, ...]: string, number, boolean, a sample person object, a list
        of any, a file of any type, and an image.
    """
    return (
        StringType(),
        NumberType(),
        BooleanType(),
        ObjectType({"name": StringType(), "age": NumberType()}),
        ListType(AnyType()),
        FileType("*/*"),
        ImageType(),
    )


def default_choice_for(value: Any) -> int | None:
    """Index of the first default choice accepting ``value`` (None if none does)."""
    return match_alternative(UnionType(default_choices()), value)
