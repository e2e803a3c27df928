"""Report page endpoint.

GET /api/report/{kind}/{report_id}/linkage-groups - Linkage group diagram data
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from lgview.api.app import get_db_session
from lgview.db.executor import QueryExecutor
from lgview.display.linkage_groups import LinkageGroupDisplayer
from lgview.models.domain import ReportSubjectKind
from lgview.models.types import LinkageGroupDisplay

router = APIRouter()


@router.get(
    "/report/{kind}/{report_id}/linkage-groups",
    response_model=LinkageGroupDisplay,
    responses={204: {"description": "No linkage group for this report subject"}},
)
def get_linkage_groups(
    kind: ReportSubjectKind,
    report_id: int,
    session: Session = Depends(get_db_session),
):
    """Get linkage group diagram data for a report page.

    Args:
        kind: Report subject type (GeneticMap, LinkageGroup or QTL).
        report_id: Report subject id.
        session: Database session (injected).

    Returns:
        tracksJSON, tracksCount and maxLGLength, or 204 if there is nothing
        to draw.
    """
    displayer = LinkageGroupDisplayer(QueryExecutor(session))
    display = displayer.display(report_id, kind)

    if display is None:
        return Response(status_code=204)

    return display
