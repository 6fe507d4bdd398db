"""Functions for reading path data from SVG documents."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import TYPE_CHECKING

from defusedxml.ElementTree import fromstring

from .parser import PathParser

if TYPE_CHECKING:
    from collections.abc import Iterator
    from xml.etree import ElementTree as ET

    from .constants import NumericMode
    from .visitor import PathVisitor

logger = logging.getLogger(__name__)

SVG_NAMESPACE = "{http://www.w3.org/2000/svg}"


def save_parse(data: str) -> ET.Element:
    """Safely parse an SVG string."""
    return fromstring(data)  # type: ignore[no-any-return]


def read_tree(data: str | Path) -> ET.Element:
    """Read an SVG tree from a string or a file."""
    if isinstance(data, Path):
        data = data.read_text("utf-8")

    return save_parse(data)


def filtered_tag(tag: str) -> str:
    """Get the tag without the provider.

    Examples:
        >>> filtered_tag("{http://www.w3.org/2000/svg}path")
        'path'
        >>> filtered_tag("path")
        'path'
    """
    return re.sub(r"\{.*\}", "", tag)


def is_svg_path(elem: ET.Element) -> bool:
    """Check if the element is a `<path>` in the SVG or in no namespace."""
    return elem.tag in {f"{SVG_NAMESPACE}path", "path"}


def iter_path_data(tree: ET.Element) -> Iterator[str]:
    """Yield the `d` attribute of every path element in document order.

    Paths without a `d` attribute are skipped.
    """
    for elem in tree.iter():
        if not is_svg_path(elem):
            continue

        d = elem.get("d")
        if d is None:
            logger.debug("Skipping %s without path data", filtered_tag(elem.tag))
            continue

        yield d


def parse_svg_paths(
    data: str | Path,
    visitor: PathVisitor | None = None,
    *,
    numeric_mode: NumericMode | None = None,
) -> int:
    """Parse the path data of every path in an SVG document.

    `begin_parse` is called on the visitor once per path.

    Args:
        data: The SVG document as a string or a file path.
        visitor: The visitor receiving the commands of all paths.
        numeric_mode: See :class:`~svg_path_parser.parser.PathParser`.

    Returns:
        The number of parsed paths.

    Raises:
        PathDataError: If the path data of any path is invalid.
    """
    tree = read_tree(data)
    parser = PathParser(visitor, numeric_mode=numeric_mode)

    count = 0
    for d in iter_path_data(tree):
        parser.parse_data(d)
        count += 1

    logger.debug("Parsed %d paths", count)
    return count
