"""Build tracing: per-extractor records of a scene build."""

from mapscene.tracing.models import BuildReport, ExtractionRecord

__all__ = [
    "BuildReport",
    "ExtractionRecord",
]
