"""Linkage group diagram for GeneticMap, LinkageGroup and QTL report pages.

Finds the linkage groups for the report subject, then the markers and QTLs
on each, and hands the rendering layer a track JSON document, the number
of linkage groups, and the longest linkage group length.

Queries run one at a time: one linkage group query, then one marker query
and one QTL query per linkage group.
"""

from __future__ import annotations

import logging

from sqlalchemy import Row

from lgview.db.executor import QueryExecutor
from lgview.db.queries import linkage_group_query, marker_query, qtl_query
from lgview.display.tracks import build_tracks, serialize_tracks
from lgview.models.domain import (
    LinkageGroupEntity,
    LinkageGroupFeatures,
    MarkerEntity,
    MissingFieldError,
    QTLEntity,
    ReportSubjectKind,
)
from lgview.models.types import LinkageGroupDisplay

logger = logging.getLogger(__name__)


# ============================================================================
# Converters: Row -> Domain
# ============================================================================


def _require(value, entity: str, entity_id: int, field: str):
    if value is None:
        raise MissingFieldError(f"{entity} {entity_id} has no {field}")
    return value


def _row_to_linkage_group(row: Row) -> LinkageGroupEntity:
    lg_id = row[0]
    return LinkageGroupEntity(
        id=lg_id,
        identifier=row[1],
        length=float(_require(row[2], "LinkageGroup", lg_id, "length")),
        number=row[3],
    )


def _row_to_marker(row: Row) -> MarkerEntity:
    marker_id = row[0]
    return MarkerEntity(
        id=marker_id,
        identifier=row[1],
        position=float(_require(row[2], "GeneticMarker", marker_id, "position")),
    )


def _row_to_qtl(row: Row) -> QTLEntity:
    qtl_id = row[0]
    return QTLEntity(
        id=qtl_id,
        identifier=row[1],
        start=float(_require(row[2], "QTL", qtl_id, "start")),
        end=float(_require(row[3], "QTL", qtl_id, "end")),
    )


# ============================================================================
# Displayer
# ============================================================================


class LinkageGroupDisplayer:
    """Builds linkage group diagram data for one report page at a time.

    Holds no state between display calls.
    """

    def __init__(self, executor: QueryExecutor):
        """Initialize displayer.

        Args:
            executor: Query executor used for every lookup.
        """
        self.executor = executor

    def display(self, report_id: int, kind: ReportSubjectKind) -> LinkageGroupDisplay | None:
        """Build the diagram data for a report subject.

        Args:
            report_id: Id of the object the report page shows.
            kind: Type of that object.

        Returns:
            LinkageGroupDisplay, or None if no linkage group matches.

        Raises:
            DataRetrievalError: If any query fails.
            MissingFieldError: If a row lacks a length, position, start or end.
        """
        linkage_groups = self.fetch_linkage_groups(report_id, kind)

        if not linkage_groups:
            logger.info(
                f"No linkage group returned for report_id={report_id} and kind={kind.value}"
            )
            return None

        logger.info(
            f"Found {len(linkage_groups)} linkage groups for {kind.value} {report_id}"
        )

        markers = {lg.id: self.fetch_markers(lg.id) for lg in linkage_groups}
        qtls = {lg.id: self.fetch_qtls(lg.id) for lg in linkage_groups}

        groups = [
            LinkageGroupFeatures(linkage_group=lg, markers=markers[lg.id], qtls=qtls[lg.id])
            for lg in linkage_groups
        ]
        for group in groups:
            logger.debug(
                f"LinkageGroup {group.linkage_group.identifier}: "
                f"{len(group.markers)} markers, {len(group.qtls)} QTLs"
            )

        document = build_tracks(groups)

        return LinkageGroupDisplay(
            tracks_json=serialize_tracks(document),
            tracks_count=len(linkage_groups),
            max_lg_length=max_length(linkage_groups),
        )

    def display_for_class_name(self, report_id: int, class_name: str) -> LinkageGroupDisplay | None:
        """Build the diagram data given the report object's class name.

        Raises:
            UnsupportedSubjectKindError: If class_name is not a supported type.
        """
        return self.display(report_id, ReportSubjectKind.from_class_name(class_name))

    def fetch_linkage_groups(
        self, report_id: int, kind: ReportSubjectKind
    ) -> list[LinkageGroupEntity]:
        """Get linkage groups for the report subject, ordered by number."""
        result = self.executor.execute(linkage_group_query(report_id, kind))
        return [_row_to_linkage_group(row) for row in result]

    def fetch_markers(self, linkage_group_id: int) -> list[MarkerEntity]:
        """Get markers on a linkage group, ordered by position."""
        result = self.executor.execute(marker_query(linkage_group_id))
        return [_row_to_marker(row) for row in result]

    def fetch_qtls(self, linkage_group_id: int) -> list[QTLEntity]:
        """Get QTLs on a linkage group, ordered by start."""
        result = self.executor.execute(qtl_query(linkage_group_id))
        return [_row_to_qtl(row) for row in result]


def max_length(linkage_groups: list[LinkageGroupEntity]) -> float:
    """Longest linkage group length, never below 0.0."""
    return max([0.0] + [lg.length for lg in linkage_groups])
