#!/usr/bin/env python3
"""Generate synthetic HGT tile fixtures.

This script writes the tiles defined in shared/synthetic_tiles.py so they can
be inspected or used for manual panorama runs. The test suite writes the same
tiles into a temporary directory on its own and does not need this output.

Usage:
    python scripts/gen_fixtures.py

Requirements:
    pip install numpy

Output:
    tests/fixtures/*.hgt (about 26 MB each)

Dependencies:
    This script imports from shared/ (not tests/) to avoid circular
    dependencies between scripts and tests packages.
"""

from __future__ import annotations

from pathlib import Path

from shared.fixtures_expected import EXPECTED_FIXTURE_COUNT, EXPECTED_FIXTURES
from shared.synthetic_tiles import write_all_tiles

# Output directory
FIXTURES_DIR = Path(__file__).parent.parent / "tests" / "fixtures"


def main() -> int:
    print(f"Output directory: {FIXTURES_DIR}")
    written = write_all_tiles(FIXTURES_DIR)

    found_set = {path.name for path in written}
    expected_set = set(EXPECTED_FIXTURES)
    if found_set != expected_set:
        print("ERROR: Fixture filenames do not match expected list!")
        missing = expected_set - found_set
        extra = found_set - expected_set
        if missing:
            print(f"  Missing (expected but not generated): {sorted(missing)}")
        if extra:
            print(f"  Extra (generated but not expected): {sorted(extra)}")
        print("\nUpdate shared/fixtures_expected.py to match generated fixtures.")
        return 1

    print("\nGenerated files:")
    for path in sorted(written):
        print(f"  {path.name:20} {path.stat().st_size / 1024 / 1024:>8.1f}MB")

    print(f"\nAll {EXPECTED_FIXTURE_COUNT} fixtures verified successfully.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
