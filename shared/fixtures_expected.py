"""Single source of truth for the synthetic HGT tile fixtures.

This module defines the list of expected fixture filenames used by both:
- scripts/gen_fixtures.py (generation verification)
- tests/gis/test_fixtures_sanity.py (existence verification)

When adding/removing fixtures, update ONLY this list and the matching
builder in shared/synthetic_tiles.py.
"""

from __future__ import annotations

# Sorted alphabetically for deterministic comparison.
EXPECTED_FIXTURES: list[str] = sorted(
    [
        "N46E007.hgt",  # Eastward ramp with marked corners
        "N46E008.hgt",  # Flat plateau east of the ramp
        "N47E007.hgt",  # Flat plateau north of the ramp
    ]
)

EXPECTED_FIXTURE_COUNT: int = len(EXPECTED_FIXTURES)
