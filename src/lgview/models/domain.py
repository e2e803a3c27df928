"""Domain models for lgview.

Plain dataclasses for query results, independent of SQLAlchemy.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class UnsupportedSubjectKindError(ValueError):
    """Raised when a report page type has no linkage-group filter."""


class MissingFieldError(ValueError):
    """Raised when a result row lacks a value required for drawing."""


# ============================================================================
# Report Subject
# ============================================================================


class ReportSubjectKind(str, Enum):
    """Report page types that can show the linkage group diagram."""

    GENETIC_MAP = "GeneticMap"
    LINKAGE_GROUP = "LinkageGroup"
    QTL = "QTL"

    @classmethod
    def from_class_name(cls, class_name: str) -> ReportSubjectKind:
        """Parse a report object's class name.

        Args:
            class_name: Simple class name, e.g. "GeneticMap".

        Returns:
            Matching ReportSubjectKind.

        Raises:
            UnsupportedSubjectKindError: If the class name is not supported.
        """
        try:
            return cls(class_name)
        except ValueError as e:
            raise UnsupportedSubjectKindError(
                f"No linkage group diagram for report objects of type {class_name!r}"
            ) from e


# ============================================================================
# Query Results
# ============================================================================


@dataclass(frozen=True)
class LinkageGroupEntity:
    """A linkage group row."""

    id: int
    identifier: str
    length: float
    number: int | None


@dataclass(frozen=True)
class MarkerEntity:
    """A genetic marker placed on one linkage group."""

    id: int
    identifier: str
    position: float


@dataclass(frozen=True)
class QTLEntity:
    """A QTL span on one linkage group."""

    id: int
    identifier: str
    start: float
    end: float


@dataclass
class LinkageGroupFeatures:
    """A linkage group with its ordered markers and QTLs."""

    linkage_group: LinkageGroupEntity
    markers: list[MarkerEntity]
    qtls: list[QTLEntity]
