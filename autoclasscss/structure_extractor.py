"""
Structure Extractor Module
Scans raw HTML text for opening tags, closing tags and class attributes
and merges them into a single position-ordered event list.
"""

import re
import logging
from dataclasses import dataclass
from typing import List, Union

logger = logging.getLogger(__name__)

OPEN_TAG_RE = re.compile(r'<[-A-Za-z0-9_]+')
CLOSE_TAG_RE = re.compile(r'</')
CLASS_ATTR_RE = re.compile(r'\s+class\s*=\s*([\'"])([-A-Za-z0-9_\s]*)\1')


@dataclass(frozen=True)
class TagOpen:
    position: int
    tag_name: str


@dataclass(frozen=True)
class TagClose:
    position: int


@dataclass(frozen=True)
class ClassOccurrence:
    position: int
    class_name: str


StructuralEvent = Union[TagOpen, TagClose, ClassOccurrence]


class StructureExtractor:
    """Extractor of structural events from HTML markup."""

    def extract(self, html_content: str) -> List[StructuralEvent]:
        """
        Return every tag open, tag close and class occurrence in ``html_content``,
        ordered by source position.

        Each class token inside one attribute is offset by its index, so tokens
        keep their left-to-right order after the merge.
        """
        open_tags = self.find_open_tags(html_content)
        close_tags = self.find_close_tags(html_content)
        classes = self.find_classes(html_content)
        logger.debug(f"Found {len(open_tags)} open tags, {len(close_tags)} close tags, "
                     f"{len(classes)} class occurrences")

        events: List[StructuralEvent] = [*open_tags, *close_tags, *classes]
        # sorted() is stable, so ties keep open < close < class order
        return sorted(events, key=lambda event: event.position)

    def find_open_tags(self, html_content: str) -> List[TagOpen]:
        return [TagOpen(match.start(), match.group(0)[1:])
                for match in OPEN_TAG_RE.finditer(html_content)]

    def find_close_tags(self, html_content: str) -> List[TagClose]:
        return [TagClose(match.start()) for match in CLOSE_TAG_RE.finditer(html_content)]

    def find_classes(self, html_content: str) -> List[ClassOccurrence]:
        occurrences = []
        for match in CLASS_ATTR_RE.finditer(html_content):
            # str.split() with no argument collapses whitespace runs and drops empties
            for index, class_name in enumerate(match.group(2).split()):
                occurrences.append(ClassOccurrence(match.start() + index, class_name))
        return occurrences
