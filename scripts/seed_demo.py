#!/usr/bin/env python3
"""Seed a demo genetic map and print its linkage group diagram data.

Usage:
    python scripts/seed_demo.py

This script:
1. Initializes the demo database
2. Seeds a genetic map with linkage groups, markers and QTLs
3. Runs the linkage group displayer for the map and prints the output
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from lgview.db.executor import QueryExecutor  # noqa: E402
from lgview.db.schema import (  # noqa: E402
    QTL,
    GeneticMap,
    GeneticMarker,
    LinkageGroup,
    LinkageGroupPosition,
)
from lgview.db.session import get_db_session, init_db  # noqa: E402
from lgview.display.linkage_groups import LinkageGroupDisplayer  # noqa: E402
from lgview.models.domain import ReportSubjectKind  # noqa: E402

DEMO_DB_PATH = PROJECT_ROOT / "demo.db"

DEMO_MAP_ID = 1

# (identifier, number, length, markers [(name, position)], qtls [(name, start, end)])
DEMO_LINKAGE_GROUPS = [
    (
        "GmComposite1999_A1",
        1,
        120.5,
        [("Satt684", 3.2), ("Satt300", 10.0), ("Sat_356", 58.7)],
        [("Seed weight 1-1", 5.0, 15.0), ("Plant height 2-3", 40.0, 72.5)],
    ),
    (
        "GmComposite1999_A2",
        2,
        95.0,
        [("Satt390", 0.0), ("Satt233", 47.1)],
        [],
    ),
    ("GmComposite1999_B1", 3, 88.25, [], []),
]


def seed(db_path: Path) -> None:
    """Insert the demo genetic map if it is not already present."""
    with get_db_session(db_path) as session:
        if session.get(GeneticMap, DEMO_MAP_ID) is not None:
            print(f"Genetic map {DEMO_MAP_ID} already seeded")
            return

        genetic_map = GeneticMap(id=DEMO_MAP_ID, identifier="GmComposite1999")
        session.add(genetic_map)

        for identifier, number, length, markers, qtls in DEMO_LINKAGE_GROUPS:
            lg = LinkageGroup(
                identifier=identifier,
                number=number,
                length=length,
                genetic_map=genetic_map,
            )
            session.add(lg)
            for name, position in markers:
                marker = GeneticMarker(secondary_identifier=name)
                session.add(marker)
                session.add(
                    LinkageGroupPosition(marker=marker, linkage_group=lg, position=position)
                )
            for name, start, end in qtls:
                session.add(QTL(identifier=name, start=start, end=end, linkage_group=lg))

    print(f"Seeded genetic map {DEMO_MAP_ID} with {len(DEMO_LINKAGE_GROUPS)} linkage groups")


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    init_db(DEMO_DB_PATH)
    seed(DEMO_DB_PATH)

    with get_db_session(DEMO_DB_PATH) as session:
        displayer = LinkageGroupDisplayer(QueryExecutor(session))
        display = displayer.display(DEMO_MAP_ID, ReportSubjectKind.GENETIC_MAP)

    if display is None:
        print("No linkage groups found")
        return 1

    print(f"tracksCount: {display.tracks_count}")
    print(f"maxLGLength: {display.max_lg_length}")
    print(json.dumps(json.loads(display.tracks_json), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
