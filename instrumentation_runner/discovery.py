"""Discover instrumentation test classes in a flat source directory."""

import logging
import re
from collections.abc import Sequence
from pathlib import Path

log = logging.getLogger(__name__)


class DiscoveryError(Exception):
    """Raised when the test directory cannot be scanned."""


def discover_test_classes(
    path: Path,
    package: str,
    pattern: re.Pattern[str],
    extension: str = ".java",
) -> Sequence[str]:
    """List fully qualified test classes found in a directory.

    All test classes are assumed to live flat in one folder, one class per
    file named after the class.

    Args:
        path: Directory holding the test sources
        package: Package prefixed to every class name
        pattern: Filter applied to the fully qualified class name
        extension: Source file extension (e.g., ".java")

    Returns:
        Matching class names, sorted by file name

    Raises:
        DiscoveryError: If ``path`` is not an existing directory

    """
    if not path.is_dir():
        raise DiscoveryError(f"Test directory not found: {path}")

    file_names = sorted(
        entry.name for entry in path.iterdir() if entry.name.endswith(extension)
    )
    test_classes = [
        f"{package}.{name.removesuffix(extension)}" for name in file_names
    ]
    matching = [clazz for clazz in test_classes if pattern.search(clazz)]

    log.info(
        "Discovered %d test class(es) in %s, %d matching filter",
        len(test_classes),
        path,
        len(matching),
    )
    return matching


def select_shard(
    test_classes: Sequence[str],
    offset: int | None,
    count: int | None,
) -> Sequence[str]:
    """Select the shard at ``offset`` of size ``count``.

    Shards are contiguous: shard ``offset`` covers indices
    ``[offset * count, offset * count + count)``, clipped to the list. A
    start index past the end yields an empty shard. Without both
    ``offset`` and ``count`` the full list is returned.
    """
    if offset is None or count is None:
        return list(test_classes)

    start = offset * count
    if start >= len(test_classes):
        return []
    return list(test_classes[start : start + count])
