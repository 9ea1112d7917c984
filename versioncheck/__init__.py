"""
VersionCheck — Build-time version consistency check.

Verifies that a package manifest, its lockstep development dependencies,
the locally installed copy, and the built dist files all agree on a
single version before anything gets published.
"""

__version__ = "0.1.0"
