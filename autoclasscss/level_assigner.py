"""
Level Assigner Module
Replays structural events over an implicit tag stack and assigns each
distinct class the nesting level of the tag that first introduced it.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Set, Tuple

from .structure_extractor import ClassOccurrence, StructuralEvent, TagClose, TagOpen

logger = logging.getLogger(__name__)

VOID_ELEMENTS = frozenset({
    'doctype', 'area', 'base', 'br', 'col', 'command', 'embed', 'frame',
    'hr', 'img', 'input', 'keygen', 'link', 'meta', 'param', 'source', 'wbr'
})

LIST_CONTAINERS = frozenset({'ul', 'ol'})


def is_void_element(tag_name: str) -> bool:
    return tag_name.lower() in VOID_ELEMENTS


@dataclass(frozen=True)
class LeveledClass:
    tag_name: str
    class_name: str
    level: int
    child_tag: Optional[str] = None


@dataclass
class OpenTagFrame:
    tag_name: str
    is_void_element: bool
    classes: List[str] = field(default_factory=list)
    level: Optional[int] = None
    settled: bool = False


class LevelAssigner:
    """
    Stack replay over a flat event list.

    Only class-bearing frames add depth, so class-less wrapper elements do not
    indent their styled descendants. Closing tags are matched to openings by
    stack order alone; a close on an empty stack is ignored and frames left
    open at the end of input are dropped.
    """

    def __init__(self, ignored_classes: Iterable[str] = (), list_item_hooks: bool = False):
        self.ignored_classes = frozenset(ignored_classes)
        self.list_item_hooks = list_item_hooks

    def assign(self, events: Iterable[StructuralEvent]) -> List[LeveledClass]:
        stack: List[OpenTagFrame] = []
        seen: Set[Tuple[str, Optional[str]]] = set()
        leveled: List[LeveledClass] = []

        for event in events:
            if isinstance(event, TagOpen):
                self._settle_top(stack, seen, leveled)
                stack.append(OpenTagFrame(event.tag_name, is_void_element(event.tag_name)))
            elif isinstance(event, ClassOccurrence):
                self._add_class(stack, event.class_name, seen, leveled)
            elif isinstance(event, TagClose):
                self._settle_top(stack, seen, leveled)
                if stack:
                    stack.pop()

        self._settle_top(stack, seen, leveled)
        if stack:
            logger.debug(f"Discarding {len(stack)} unclosed tags")
        logger.debug(f"Assigned levels to {len(leveled)} classes")
        return leveled

    def _add_class(self, stack: List[OpenTagFrame], class_name: str,
                   seen: Set[Tuple[str, Optional[str]]], leveled: List[LeveledClass]):
        if class_name in self.ignored_classes:
            return
        if not stack:
            logger.debug(f"Dropping class outside of any open tag: {class_name}")
            return

        frame = stack[-1]
        frame.classes.append(class_name)
        key = (class_name, None)
        if key in seen:
            return
        seen.add(key)
        leveled.append(LeveledClass(frame.tag_name, class_name, self._level_of(stack, len(stack) - 1)))

    def _level_of(self, stack: List[OpenTagFrame], index: int) -> int:
        """Count the class-bearing frames below ``stack[index]``, caching the result."""
        frame = stack[index]
        if frame.level is None:
            frame.level = sum(1 for ancestor in stack[:index] if ancestor.classes)
        return frame.level

    def _settle_top(self, stack: List[OpenTagFrame],
                    seen: Set[Tuple[str, Optional[str]]], leveled: List[LeveledClass]):
        """
        Finish the most recently opened frame once its class attribute is behind us.

        Emits a list-item hook when enabled and drops void elements from the stack.
        """
        if not stack or stack[-1].settled:
            return
        frame = stack[-1]
        frame.settled = True

        if self.list_item_hooks:
            self._add_list_item_hook(stack, seen, leveled)

        if frame.is_void_element:
            stack.pop()

    def _add_list_item_hook(self, stack: List[OpenTagFrame],
                            seen: Set[Tuple[str, Optional[str]]], leveled: List[LeveledClass]):
        frame = stack[-1]
        if len(stack) < 2 or frame.classes or frame.tag_name.lower() != 'li':
            return
        parent = stack[-2]
        if parent.tag_name.lower() not in LIST_CONTAINERS or not parent.classes:
            return

        class_name = parent.classes[0]
        key = (class_name, frame.tag_name)
        if key in seen:
            return
        seen.add(key)
        level = self._level_of(stack, len(stack) - 2) + 1
        leveled.append(LeveledClass(parent.tag_name, class_name, level, child_tag=frame.tag_name))
