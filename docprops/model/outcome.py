"""Typed per-extractor results collected by the aggregator."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


class ExtractionStatus(Enum):
    """Status of a single extractor run."""
    SUCCESS = "success"
    FAILED = "failed"


@dataclass
class ExtractionOutcome:
    """Result of running one format extractor: a property map or an error."""

    extractor: str
    status: ExtractionStatus
    properties: Dict[str, str] = field(default_factory=dict)
    error_type: Optional[str] = None
    error_message: Optional[str] = None

    @classmethod
    def success(cls, extractor: str, properties: Dict[str, str]) -> "ExtractionOutcome":
        return cls(extractor=extractor, status=ExtractionStatus.SUCCESS, properties=properties)

    @classmethod
    def failure(cls, extractor: str, error: Exception) -> "ExtractionOutcome":
        return cls(
            extractor=extractor,
            status=ExtractionStatus.FAILED,
            error_type=type(error).__name__,
            error_message=str(error),
        )

    @property
    def is_success(self) -> bool:
        """Check if the extractor produced a property map."""
        return self.status == ExtractionStatus.SUCCESS

    @property
    def is_failed(self) -> bool:
        """Check if the extractor failed."""
        return self.status == ExtractionStatus.FAILED

    def __str__(self) -> str:
        if self.is_failed:
            return f"{self.extractor}: {self.error_type}: {self.error_message}"
        return f"{self.extractor}: {len(self.properties)} properties"


@dataclass
class ExtractionReport:
    """
    Merged properties of one parse call plus the outcome of every extractor.

    The merged map and the outcomes are kept apart so callers can print the
    properties without caring about which extractors failed.
    """

    source: str
    properties: Dict[str, str] = field(default_factory=dict)
    outcomes: List[ExtractionOutcome] = field(default_factory=list)

    @property
    def failures(self) -> List[ExtractionOutcome]:
        return [outcome for outcome in self.outcomes if outcome.is_failed]

    def merge(self, outcome: ExtractionOutcome) -> int:
        """Record an outcome and merge its properties first-writer-wins.

        Returns:
            Number of keys newly added to the merged map.
        """
        self.outcomes.append(outcome)
        added = 0
        for key, value in outcome.properties.items():
            if key not in self.properties:
                self.properties[key] = value
                added += 1
        return added
