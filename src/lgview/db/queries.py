"""Query builders for the linkage group diagram.

Each builder returns a SQLAlchemy Select and does no I/O. Column order in
each select is the row layout the displayer reads.
"""

from __future__ import annotations

from sqlalchemy import Select, select

from lgview.db.schema import QTL, GeneticMarker, LinkageGroup, LinkageGroupPosition
from lgview.models.domain import ReportSubjectKind


def linkage_group_query(report_id: int, kind: ReportSubjectKind) -> Select:
    """Build the linkage group query for a report page.

    Rows: (id, identifier, length, number), ordered by number.

    Args:
        report_id: Id of the object the report page shows.
        kind: Type of that object.

    Returns:
        Select over linkage groups belonging to the report subject.
    """
    query = select(
        LinkageGroup.id,
        LinkageGroup.identifier,
        LinkageGroup.length,
        LinkageGroup.number,
    )

    if kind is ReportSubjectKind.GENETIC_MAP:
        query = query.where(LinkageGroup.genetic_map_id == report_id)
    elif kind is ReportSubjectKind.QTL:
        query = query.join(QTL, QTL.linkage_group_id == LinkageGroup.id).where(
            QTL.id == report_id
        )
    elif kind is ReportSubjectKind.LINKAGE_GROUP:
        query = query.where(LinkageGroup.id == report_id)
    else:
        raise ValueError(f"Unhandled report subject kind: {kind!r}")

    return query.order_by(LinkageGroup.number.asc(), LinkageGroup.id.asc())


def marker_query(linkage_group_id: int) -> Select:
    """Build the marker query for one linkage group.

    Rows: (id, secondary_identifier, position), ordered by position.
    """
    return (
        select(
            GeneticMarker.id,
            GeneticMarker.secondary_identifier,
            LinkageGroupPosition.position,
        )
        .join(LinkageGroupPosition, LinkageGroupPosition.marker_id == GeneticMarker.id)
        .where(LinkageGroupPosition.linkage_group_id == linkage_group_id)
        .order_by(LinkageGroupPosition.position.asc(), GeneticMarker.id.asc())
    )


def qtl_query(linkage_group_id: int) -> Select:
    """Build the QTL query for one linkage group.

    Rows: (id, identifier, start, end), ordered by start.
    """
    return (
        select(QTL.id, QTL.identifier, QTL.start, QTL.end)
        .where(QTL.linkage_group_id == linkage_group_id)
        .order_by(QTL.start.asc(), QTL.id.asc())
    )
