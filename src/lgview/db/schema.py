"""Database schema for lgview.

Genetic maps own linkage groups. Markers are placed on linkage groups
through position records, and QTLs reference a single linkage group.
Measured columns are nullable; readers must check them.
"""

from sqlalchemy import Float, ForeignKey, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class GeneticMap(Base):
    """A genetic map: a collection of linkage groups."""

    __tablename__ = "genetic_maps"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    identifier: Mapped[str] = mapped_column(String(128), nullable=False)

    linkage_groups: Mapped[list["LinkageGroup"]] = relationship(back_populates="genetic_map")


class LinkageGroup(Base):
    """A linkage group on a genetic map."""

    __tablename__ = "linkage_groups"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    identifier: Mapped[str] = mapped_column(String(128), nullable=False)
    length: Mapped[float | None] = mapped_column(Float, nullable=True)
    number: Mapped[int | None] = mapped_column(Integer, nullable=True)
    genetic_map_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("genetic_maps.id"), nullable=True
    )

    genetic_map: Mapped[GeneticMap | None] = relationship(back_populates="linkage_groups")
    qtls: Mapped[list["QTL"]] = relationship(back_populates="linkage_group")
    positions: Mapped[list["LinkageGroupPosition"]] = relationship(
        back_populates="linkage_group"
    )


class GeneticMarker(Base):
    """A genetic marker. Its position depends on the linkage group."""

    __tablename__ = "genetic_markers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    secondary_identifier: Mapped[str] = mapped_column(String(128), nullable=False)

    linkage_group_positions: Mapped[list["LinkageGroupPosition"]] = relationship(
        back_populates="marker"
    )


class LinkageGroupPosition(Base):
    """Placement of a marker on a linkage group."""

    __tablename__ = "linkage_group_positions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    position: Mapped[float | None] = mapped_column(Float, nullable=True)
    marker_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("genetic_markers.id"), nullable=False
    )
    linkage_group_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("linkage_groups.id"), nullable=False
    )

    marker: Mapped[GeneticMarker] = relationship(back_populates="linkage_group_positions")
    linkage_group: Mapped[LinkageGroup] = relationship(back_populates="positions")


class QTL(Base):
    """A quantitative trait locus spanning part of a linkage group.

    start <= end is expected but not enforced.
    """

    __tablename__ = "qtls"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    identifier: Mapped[str] = mapped_column(String(128), nullable=False)
    start: Mapped[float | None] = mapped_column(Float, nullable=True)
    end: Mapped[float | None] = mapped_column(Float, nullable=True)
    linkage_group_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("linkage_groups.id"), nullable=True
    )

    linkage_group: Mapped[LinkageGroup | None] = relationship(back_populates="qtls")
