"""Data models for build tracing.

A BuildReport records what each extractor contributed to a scene, which is
handy when a map loads but looks wrong.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True)
class ExtractionRecord:
    """What one extractor did during a build.

    Attributes:
        extractor: Extractor name.
        section: Document section the extractor reads.
        entities_added: Entities appended to the scene.
        lights_added: Lights appended to the scene.
        materials_added: New material registry entries (rebinding an id adds none).
        skipped: Entries ignored by the recovery policy.
        duration_ms: Wall time spent in the extractor.
    """

    extractor: str
    section: str
    entities_added: int = 0
    lights_added: int = 0
    materials_added: int = 0
    skipped: int = 0
    duration_ms: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {
            "extractor": self.extractor,
            "section": self.section,
            "entities_added": self.entities_added,
            "lights_added": self.lights_added,
            "materials_added": self.materials_added,
            "skipped": self.skipped,
            "duration_ms": self.duration_ms,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ExtractionRecord:
        return cls(
            extractor=data["extractor"],
            section=data["section"],
            entities_added=data.get("entities_added", 0),
            lights_added=data.get("lights_added", 0),
            materials_added=data.get("materials_added", 0),
            skipped=data.get("skipped", 0),
            duration_ms=data.get("duration_ms", 0.0),
        )


@dataclass(slots=True)
class BuildReport:
    """Ordered extraction records for one successful build.

    Example:
        report = BuildReport(source="data/maps/n1.xml")
        report.records.append(ExtractionRecord("extract_walls", "wall", entities_added=12))
    """

    source: str
    records: list[ExtractionRecord] = field(default_factory=list)

    @property
    def total_entities(self) -> int:
        return sum(r.entities_added for r in self.records)

    @property
    def total_skipped(self) -> int:
        return sum(r.skipped for r in self.records)

    def record_for(self, extractor: str) -> ExtractionRecord | None:
        for record in self.records:
            if record.extractor == extractor:
                return record
        return None

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {
            "source": self.source,
            "records": [r.to_dict() for r in self.records],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BuildReport:
        """Create from dictionary (for deserialization)."""
        return cls(
            source=data["source"],
            records=[ExtractionRecord.from_dict(r) for r in data.get("records", [])],
        )
