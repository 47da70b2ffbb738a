"""Loader models: extractor descriptors and the build context."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from mapscene.assets import AssetResolvers
from mapscene.document import MarkupElement
from mapscene.scene import Scene

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class BuildContext:
    """Everything one build threads through its extractors.

    A context is created per build and dropped with it, so builders hold no
    per-load state and can be reused.

    Attributes:
        root: Root element of the map document.
        scene: Scene under construction.
        assets: Resolvers for meshes, textures and materials.
        skipped: Entries ignored by the recovery policy, per section.
    """

    root: MarkupElement
    scene: Scene
    assets: AssetResolvers
    skipped: Counter[str] = field(default_factory=Counter)

    def skip(self, section: str, reason: str, element: MarkupElement | None = None) -> None:
        """Record an entry ignored by the recovery policy."""
        self.skipped[section] += 1
        logger.debug("Skipping %s entry %r: %s", section, element, reason)


@dataclass(frozen=True)
class ExtractorDescriptor:
    """Metadata about a section extractor.

    Attributes:
        name: Extractor function name.
        section: Document section the extractor consumes.
        run: Callable taking a BuildContext and mutating its scene.
        required: Whether the section must be present. The builder raises
            MissingRequiredSectionError instead of running the extractor
            when it is missing.
    """

    name: str
    section: str
    run: Callable[[BuildContext], Any]
    required: bool = False

    def __call__(self, ctx: BuildContext) -> None:
        self.run(ctx)


def extractor(
    section: str, *, required: bool = False
) -> Callable[[Callable[[BuildContext], Any]], ExtractorDescriptor]:
    """Declare a function as the extractor for a document section.

    Usage:
        @extractor("wall")
        def extract_walls(ctx: BuildContext) -> None:
            for node in ctx.root.children_named("wall"):
                ...

    Args:
        section: Name of the section the extractor reads.
        required: Mark the section as mandatory in the map format.

    Returns:
        Decorator that wraps the function into an ExtractorDescriptor.
    """

    def decorator(fn: Callable[[BuildContext], Any]) -> ExtractorDescriptor:
        return ExtractorDescriptor(name=fn.__name__, section=section, run=fn, required=required)

    return decorator
