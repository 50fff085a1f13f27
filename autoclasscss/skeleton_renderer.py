"""
Skeleton Renderer Module
Formats leveled classes as empty CSS rule blocks.
"""

import logging
from typing import List

from tinycss2.serializer import serialize_identifier

from .level_assigner import LeveledClass
from .render_config import RenderConfig

logger = logging.getLogger(__name__)


class SkeletonRenderer:
    """Renderer of empty rule blocks, one per leveled class."""

    def __init__(self, config: RenderConfig):
        self.config = config

    def render(self, classes: List[LeveledClass]) -> str:
        blocks = [self.render_block(leveled) for leveled in classes]
        logger.debug(f"Rendered {len(blocks)} rule blocks")
        separator = '\n' + '\n' * self.config.rule_separator_blank_lines
        return separator.join(blocks)

    def render_block(self, leveled: LeveledClass) -> str:
        config = self.config
        indent = '' if config.flat_layout else config.indent_unit * leveled.level
        body = '\n' + indent + config.indent_unit if config.inner_blank_line else ''
        return self.selector(leveled, indent) + self.brace(indent) + body + '\n' + indent + '}'

    def selector(self, leveled: LeveledClass, indent: str) -> str:
        tag_prefix = leveled.tag_name if self.config.includes_tag(leveled.tag_name) else ''
        class_name = leveled.class_name
        if self.config.escape_identifiers:
            class_name = serialize_identifier(class_name)
        selector = f"{indent}{tag_prefix}.{class_name}"
        if leveled.child_tag:
            selector += f" {leveled.child_tag}"
        return selector

    def brace(self, indent: str) -> str:
        if self.config.brace_style == 'newline':
            return '\n' + indent + '{'
        return ' {'
