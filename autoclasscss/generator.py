"""
Generator Module
Builder-style interface that turns HTML markup into a CSS skeleton.
"""

import logging
from dataclasses import replace
from typing import Iterable, List, Optional, Union

from .errors import ConfigurationError
from .level_assigner import LevelAssigner, LeveledClass
from .render_config import RenderConfig, build_indent
from .skeleton_renderer import SkeletonRenderer
from .structure_extractor import StructureExtractor

logger = logging.getLogger(__name__)


def leveled_classes(html_content: str, config: Optional[RenderConfig] = None) -> List[LeveledClass]:
    """Extract the distinct classes of ``html_content`` with their nesting levels."""
    config = config or RenderConfig()
    events = StructureExtractor().extract(html_content)
    assigner = LevelAssigner(config.ignored_classes, list_item_hooks=config.list_item_hooks)
    return assigner.assign(events)


def generate_skeleton(html_content: str, config: Optional[RenderConfig] = None) -> str:
    """Return an empty CSS rule block for every distinct class in ``html_content``."""
    config = config or RenderConfig()
    logger.info(f"Generating CSS skeleton, input length: {len(html_content)}")
    css = SkeletonRenderer(config).render(leveled_classes(html_content, config))
    logger.info("CSS skeleton generation complete")
    return css


class Autoclasscss:
    """
    Chainable generator of CSS skeletons.

    Every setter returns the generator itself and swaps in a new immutable
    ``RenderConfig``; a setter that raises ``ConfigurationError`` leaves the
    current configuration untouched.

        css = (Autoclasscss('<div class="wrap"><p class="text"></p></div>')
               .set_indent('tabs')
               .set_tag_inclusion(['p'])
               .render())
    """

    def __init__(self, html_content: str = ''):
        self.html_content = html_content or ''
        self._config = RenderConfig()

    @property
    def config(self) -> RenderConfig:
        return self._config

    def _update(self, **changes) -> 'Autoclasscss':
        self._config = replace(self._config, **changes)
        return self

    def set_markup(self, html_content: str) -> 'Autoclasscss':
        self.html_content = html_content
        return self

    def set_indent(self, kind: str, count: int = 1) -> 'Autoclasscss':
        """Indent with ``count`` tabs or spaces per level; ``kind`` is "tabs" or "spaces"."""
        return self._update(indent_unit=build_indent(kind, count))

    def set_ignored_classes(self, classes: Union[str, Iterable[str], bool]) -> 'Autoclasscss':
        """Add one class name or several to the ignore set; ``False`` clears it."""
        if isinstance(classes, bool):
            return self._update(ignored_classes=frozenset())
        if isinstance(classes, str):
            classes = [classes]
        return self._update(ignored_classes=self._config.ignored_classes | frozenset(classes))

    def set_flat_layout(self, enabled: bool) -> 'Autoclasscss':
        return self._update(flat_layout=enabled)

    def set_inner_blank_line(self, enabled: bool) -> 'Autoclasscss':
        return self._update(inner_blank_line=enabled)

    def set_tag_inclusion(self, policy: Union[bool, str, Iterable[str]]) -> 'Autoclasscss':
        """
        Choose which selectors are prefixed with their tag name.

        ``True`` or ``False`` for all or none, a tag name such as ``'div'``,
        or several names such as ``['ul', 'li']``.
        """
        if isinstance(policy, bool):
            return self._update(tag_inclusion=policy)
        if isinstance(policy, str):
            policy = [policy]
        return self._update(tag_inclusion=frozenset(policy))

    def set_brace_style(self, kind: str) -> 'Autoclasscss':
        return self._update(brace_style=kind)

    def set_rule_separator(self, enabled: bool, count: int = 1) -> 'Autoclasscss':
        """Put ``count`` blank lines between rule blocks when ``enabled``."""
        if not enabled:
            return self._update(rule_separator_blank_lines=0)
        if count < 1:
            raise ConfigurationError(f"Rule separator count must be positive: {count}")
        return self._update(rule_separator_blank_lines=count)

    def set_list_item_hooks(self, enabled: bool) -> 'Autoclasscss':
        return self._update(list_item_hooks=enabled)

    def set_escape_identifiers(self, enabled: bool) -> 'Autoclasscss':
        return self._update(escape_identifiers=enabled)

    def leveled_classes(self) -> List[LeveledClass]:
        return leveled_classes(self.html_content, self._config)

    def render(self) -> str:
        return generate_skeleton(self.html_content, self._config)
