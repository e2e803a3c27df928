"""Shared pytest fixtures for lgview tests."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from lgview.db.schema import (
    QTL,
    Base,
    GeneticMap,
    GeneticMarker,
    LinkageGroup,
    LinkageGroupPosition,
)


@pytest.fixture
def engine():
    """Create an in-memory SQLite engine for testing."""
    engine = create_engine("sqlite:///:memory:", echo=False)
    Base.metadata.create_all(engine)
    return engine


@pytest.fixture
def session(engine):
    """Create a database session for testing."""
    Session = sessionmaker(bind=engine)
    session = Session()
    yield session
    session.close()


def seed_genetic_map(session) -> None:
    """Seed genetic map 5 with two linkage groups.

    LG id 11 (number 1, length 120.5): marker 100 at 10.0, QTL 200 spanning 5.0-15.0.
    LG id 10 (number 2, length 95.0): no markers, no QTLs.

    Ids are chosen so that id order and number order disagree.
    """
    session.add(GeneticMap(id=5, identifier="GmComposite1999"))
    session.add(GeneticMap(id=6, identifier="OtherMap"))
    session.add(
        LinkageGroup(id=10, identifier="GmComposite1999_A2", number=2, length=95.0, genetic_map_id=5)
    )
    session.add(
        LinkageGroup(id=11, identifier="GmComposite1999_A1", number=1, length=120.5, genetic_map_id=5)
    )
    session.add(
        LinkageGroup(id=12, identifier="OtherMap_1", number=1, length=300.0, genetic_map_id=6)
    )
    session.add(GeneticMarker(id=100, secondary_identifier="Satt300"))
    session.add(LinkageGroupPosition(id=1, marker_id=100, linkage_group_id=11, position=10.0))
    session.add(QTL(id=200, identifier="Seed weight 1-1", start=5.0, end=15.0, linkage_group_id=11))
    session.commit()


@pytest.fixture
def genetic_map(session):
    """Session seeded with genetic map 5 (see seed_genetic_map)."""
    seed_genetic_map(session)
    return session
