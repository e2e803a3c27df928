"""Pydantic models for track output.

The track document is consumed by a canvasXpress-style genome diagram.
Field order is the wire order.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class BoxItem(BaseModel):
    """A box drawn over one span."""

    id: str
    key: int
    fill: str
    outline: str
    data: list[tuple[float, float]]


class TriangleItem(BaseModel):
    """A triangle drawn at a single offset."""

    id: str
    key: int
    fill: str
    outline: str
    offset: float


class BoxTrack(BaseModel):
    """Track of box items (linkage groups, QTLs)."""

    type: Literal["box"] = "box"
    data: list[BoxItem]


class TriangleTrack(BaseModel):
    """Track of triangle items (markers)."""

    type: Literal["triangle"] = "triangle"
    data: list[TriangleItem]


Track = Annotated[Union[BoxTrack, TriangleTrack], Field(discriminator="type")]


class TrackDocument(BaseModel):
    """Top-level track document: {"tracks": [...]}."""

    tracks: list[Track]


class LinkageGroupDisplay(BaseModel):
    """Values handed to the rendering layer.

    Serialized with the names the diagram template expects.
    """

    model_config = ConfigDict(populate_by_name=True)

    tracks_json: str = Field(alias="tracksJSON")
    tracks_count: int = Field(alias="tracksCount")
    max_lg_length: float = Field(alias="maxLGLength")

    def as_attributes(self) -> dict[str, object]:
        """Return the values keyed by their template attribute names."""
        return self.model_dump(by_alias=True)
