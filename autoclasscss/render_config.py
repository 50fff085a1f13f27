"""
Render Config Module
Immutable options that control how leveled classes are laid out as CSS.
"""

from dataclasses import dataclass
from typing import FrozenSet, Union

from .errors import ConfigurationError

INDENT_CHARS = {
    'tabs': '\t',
    'spaces': ' ',
}

BRACE_STYLES = ('default', 'newline')

TagInclusion = Union[bool, FrozenSet[str]]


@dataclass(frozen=True)
class RenderConfig:
    """
    Layout options for a skeleton stylesheet.

    ``tag_inclusion`` is ``True`` to prefix every selector with its tag name,
    ``False`` for none, or a set of tag names to prefix only those tags.
    ``brace_style`` is ``"default"`` (brace after the selector) or
    ``"newline"`` (brace on its own line).
    """
    indent_unit: str = '    '
    flat_layout: bool = False
    inner_blank_line: bool = True
    tag_inclusion: TagInclusion = False
    brace_style: str = 'default'
    rule_separator_blank_lines: int = 0
    ignored_classes: FrozenSet[str] = frozenset()
    list_item_hooks: bool = False
    escape_identifiers: bool = False

    def __post_init__(self):
        if self.brace_style not in BRACE_STYLES:
            raise ConfigurationError(f"Unknown brace type: {self.brace_style}")
        if self.rule_separator_blank_lines < 0:
            raise ConfigurationError(
                f"Rule separator must be a non-negative line count: {self.rule_separator_blank_lines}")

    def includes_tag(self, tag_name: str) -> bool:
        if isinstance(self.tag_inclusion, bool):
            return self.tag_inclusion
        return tag_name in self.tag_inclusion


def build_indent(kind: str, count: int = 1) -> str:
    """Return the indent unit for ``count`` tabs or spaces."""
    indent_char = INDENT_CHARS.get(kind)
    if indent_char is None:
        raise ConfigurationError(f"Unknown indent type: {kind}")
    if count < 1:
        raise ConfigurationError(f"Indent count must be positive: {count}")
    return indent_char * count
