"""Shared constants and utilities used by both scripts and tests.

This package provides a location for fixture definitions that need to be
shared across packages without creating a scripts->tests dependency.
"""

from __future__ import annotations
