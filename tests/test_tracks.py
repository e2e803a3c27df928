"""Tests for track construction and serialization."""

import json

import pytest
from pydantic import ValidationError

from lgview.display.tracks import (
    build_tracks,
    linkage_group_track,
    marker_track,
    parse_tracks,
    qtl_track,
    serialize_tracks,
)
from lgview.models.domain import (
    LinkageGroupEntity,
    LinkageGroupFeatures,
    MarkerEntity,
    QTLEntity,
)
from lgview.models.types import BoxTrack, TriangleTrack

LG = LinkageGroupEntity(id=11, identifier="A1", length=120.5, number=1)


class TestTrackBuilders:
    """Test the per-category track builders."""

    def test_linkage_group_track(self):
        """One box from 0 to length."""
        track = linkage_group_track(LG)
        assert isinstance(track, BoxTrack)
        assert len(track.data) == 1
        assert track.data[0].data == [(0.0, 120.5)]
        assert track.data[0].fill == "purple"

    def test_marker_track_keeps_input_order(self):
        """Marker items follow the given order."""
        markers = [
            MarkerEntity(id=2, identifier="b", position=1.0),
            MarkerEntity(id=1, identifier="a", position=2.0),
        ]
        track = marker_track(markers)
        assert isinstance(track, TriangleTrack)
        assert [item.key for item in track.data] == [2, 1]
        assert [item.offset for item in track.data] == [1.0, 2.0]

    def test_qtl_track_inverted_span(self):
        """start > end is kept as given."""
        track = qtl_track([QTLEntity(id=3, identifier="q", start=9.0, end=4.0)])
        assert track.data[0].data == [(9.0, 4.0)]
        assert track.data[0].fill == "yellow"

    def test_empty_tracks(self):
        """Empty inputs produce tracks with empty data."""
        assert marker_track([]).data == []
        assert qtl_track([]).data == []


class TestBuildTracks:
    """Test build_tracks over several groups."""

    def test_triples_in_group_order(self):
        """Each group adds box, triangle, box in order."""
        lg2 = LinkageGroupEntity(id=10, identifier="A2", length=95.0, number=2)
        document = build_tracks(
            [
                LinkageGroupFeatures(linkage_group=LG, markers=[], qtls=[]),
                LinkageGroupFeatures(linkage_group=lg2, markers=[], qtls=[]),
            ]
        )
        assert [t.type for t in document.tracks] == [
            "box",
            "triangle",
            "box",
            "box",
            "triangle",
            "box",
        ]
        assert document.tracks[3].data[0].key == 10

    def test_no_groups(self):
        """No groups gives an empty track list."""
        assert build_tracks([]).tracks == []


class TestSerialization:
    """Test serialize_tracks and parse_tracks."""

    def _document(self):
        return build_tracks(
            [
                LinkageGroupFeatures(
                    linkage_group=LG,
                    markers=[MarkerEntity(id=100, identifier="Satt300", position=10.0)],
                    qtls=[QTLEntity(id=200, identifier="SW 1-1", start=5.0, end=15.0)],
                )
            ]
        )

    def test_wire_shape(self):
        """Serialized JSON has the documented keys in order."""
        parsed = json.loads(serialize_tracks(self._document()))
        assert list(parsed) == ["tracks"]
        lg_track, marker, qtl = parsed["tracks"]
        assert list(lg_track) == ["type", "data"]
        assert list(lg_track["data"][0]) == ["id", "key", "fill", "outline", "data"]
        assert list(marker["data"][0]) == ["id", "key", "fill", "outline", "offset"]
        assert qtl["data"][0]["data"] == [[5.0, 15.0]]

    def test_compact(self):
        """Output has no pretty-printing whitespace."""
        assert "\n" not in serialize_tracks(self._document())

    def test_parse_restores_document(self):
        """Parsing serialized output gives back the same document."""
        document = self._document()
        assert parse_tracks(serialize_tracks(document)) == document

    def test_parse_uses_type_discriminator(self):
        """The type field selects the track model."""
        document = parse_tracks(
            '{"tracks": [{"type": "triangle", "data": []}, {"type": "box", "data": []}]}'
        )
        assert isinstance(document.tracks[0], TriangleTrack)
        assert isinstance(document.tracks[1], BoxTrack)

    def test_parse_rejects_unknown_track_type(self):
        """Unknown track types fail validation."""
        with pytest.raises(ValidationError):
            parse_tracks('{"tracks": [{"type": "circle", "data": []}]}')
