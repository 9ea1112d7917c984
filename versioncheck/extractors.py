"""
VersionCheck Extractors — Registry of ways to read a version out of a dist file.

Each extractor looks at the first line of a built artifact and pulls out the
version it was built from. The reconciler never knows the artifact format:
it asks the registered extractors in order and takes the first answer.

The registry is designed to be extensible: add new entries by appending
to the EXTRACTORS list or calling register_extractor().

Built-in extractors:
  - "banner_comment": A version anywhere in the leading comment
    (e.g., /*! react.production.min.js v19.2.0 */)
"""

import re
from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass
class VersionExtractor:
    """A single rule for reading an embedded version.

    Attributes:
        name: Unique identifier for this extractor
        pattern: Compiled pattern; its first group is the version
        description: Human-readable explanation of the format it reads
    """
    name: str
    pattern: re.Pattern
    description: str = ""

    def extract(self, line: str) -> Optional[str]:
        """Return the version found anywhere in `line`, or None."""
        match = self.pattern.search(line)
        return match.group(1) if match else None


# =============================================================================
# REGISTRY — All known artifact version formats
# =============================================================================

EXTRACTORS: list[VersionExtractor] = []


def register_extractor(extractor: VersionExtractor) -> None:
    """Register a new version extractor after the existing ones."""
    EXTRACTORS.append(extractor)


def extract_version(
    line: str,
    extractors: Optional[Iterable[VersionExtractor]] = None,
) -> Optional[str]:
    """Run extractors over a line; the first one that matches wins."""
    if extractors is None:
        extractors = EXTRACTORS
    for extractor in extractors:
        version = extractor.extract(line)
        if version is not None:
            return version
    return None


# -----------------------------------------------------------------------------
# Banner comment: /*! react.production.min.js v19.2.0 */
# -----------------------------------------------------------------------------
BANNER_COMMENT = VersionExtractor(
    name="banner_comment",
    pattern=re.compile(r"v(\d+\.\d+\.\d+)"),
    description="A 'v' followed by three dot-separated numbers anywhere on the line",
)

register_extractor(BANNER_COMMENT)
