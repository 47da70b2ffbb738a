"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from pathlib import Path

from mapscene import AssetResolvers, MapSettings, MarkupDocument, Scene, SceneBuilder
from mapscene.loader import BuildContext


@pytest.fixture
def assets():
    """Fresh in-memory asset resolvers."""
    return AssetResolvers.local()


@pytest.fixture
def settings(tmp_path):
    """Settings rooted at a temporary data directory."""
    return MapSettings(data_dir=tmp_path)


@pytest.fixture
def builder(assets, settings):
    return SceneBuilder(assets=assets, settings=settings)


@pytest.fixture
def write_map(settings):
    """Write a map file under the temporary data directory and return its path."""

    def _write(name: str, text: str) -> Path:
        path = settings.map_path(name)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_context(assets):
    """Build a BuildContext over an in-memory document."""

    def _make(text: str) -> BuildContext:
        doc = MarkupDocument.from_string(text)
        return BuildContext(root=doc.root, scene=Scene.new(), assets=assets)

    return _make
