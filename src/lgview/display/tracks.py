"""Track construction and serialization.

Each linkage group contributes three tracks, always in this order:
the linkage group box, its marker triangles, its QTL boxes.
"""

from __future__ import annotations

from lgview.models.domain import (
    LinkageGroupEntity,
    LinkageGroupFeatures,
    MarkerEntity,
    QTLEntity,
)
from lgview.models.types import (
    BoxItem,
    BoxTrack,
    Track,
    TrackDocument,
    TriangleItem,
    TriangleTrack,
)

LINKAGE_GROUP_FILL = "purple"
MARKER_FILL = "darkred"
QTL_FILL = "yellow"
OUTLINE = "black"


def linkage_group_track(linkage_group: LinkageGroupEntity) -> BoxTrack:
    """Single box spanning the whole linkage group, from 0 to its length."""
    return BoxTrack(
        data=[
            BoxItem(
                id=linkage_group.identifier,
                key=linkage_group.id,
                fill=LINKAGE_GROUP_FILL,
                outline=OUTLINE,
                data=[(0.0, linkage_group.length)],
            )
        ]
    )


def marker_track(markers: list[MarkerEntity]) -> TriangleTrack:
    """One triangle per marker at its position."""
    return TriangleTrack(
        data=[
            TriangleItem(
                id=marker.identifier,
                key=marker.id,
                fill=MARKER_FILL,
                outline=OUTLINE,
                offset=marker.position,
            )
            for marker in markers
        ]
    )


def qtl_track(qtls: list[QTLEntity]) -> BoxTrack:
    """One box per QTL; the span is kept as stored, even if start > end."""
    return BoxTrack(
        data=[
            BoxItem(
                id=qtl.identifier,
                key=qtl.id,
                fill=QTL_FILL,
                outline=OUTLINE,
                data=[(qtl.start, qtl.end)],
            )
            for qtl in qtls
        ]
    )


def build_tracks(groups: list[LinkageGroupFeatures]) -> TrackDocument:
    """Build the flat track list for all linkage groups.

    Args:
        groups: Linkage groups in display order with their features.

    Returns:
        TrackDocument with exactly three tracks per linkage group.
    """
    tracks: list[Track] = []
    for group in groups:
        tracks.append(linkage_group_track(group.linkage_group))
        tracks.append(marker_track(group.markers))
        tracks.append(qtl_track(group.qtls))
    return TrackDocument(tracks=tracks)


def serialize_tracks(document: TrackDocument) -> str:
    """Serialize a track document to compact JSON."""
    return document.model_dump_json()


def parse_tracks(tracks_json: str) -> TrackDocument:
    """Parse and validate a serialized track document.

    Raises:
        pydantic.ValidationError: If the JSON does not match the track schema.
    """
    return TrackDocument.model_validate_json(tracks_json)
