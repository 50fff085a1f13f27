import sys
import os
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from autoclasscss.level_assigner import LevelAssigner, LeveledClass, is_void_element
from autoclasscss.structure_extractor import StructureExtractor, TagOpen, TagClose, ClassOccurrence

def assign(html, ignored=(), list_item_hooks=False):
    events = StructureExtractor().extract(html)
    return LevelAssigner(ignored, list_item_hooks=list_item_hooks).assign(events)

def levels(html, **kwargs):
    return {c.class_name: c.level for c in assign(html, **kwargs)}

def test_nested_class_is_one_level_deeper():
    result = levels('<div class="a"><div class="b"></div></div>')
    assert result == {'a': 0, 'b': 1}

def test_classless_wrapper_does_not_add_depth():
    result = levels('<div class="a"><div><div class="b"></div></div></div>')
    assert result['b'] == result['a'] + 1

def test_siblings_share_a_level():
    result = levels('<div class="a"><p class="b"></p><p class="c"></p></div><div class="d"></div>')
    assert result == {'a': 0, 'b': 1, 'c': 1, 'd': 0}

def test_void_element_does_not_nest_siblings():
    result = levels('<div class="a"><img class="icon"><span class="label"></span></div>')
    assert result == {'a': 0, 'icon': 1, 'label': 1}

def test_void_element_followed_by_close():
    result = levels('<div class="a"><br class="gap"></div><p class="next"></p>')
    assert result == {'a': 0, 'gap': 1, 'next': 0}

def test_void_lookup_ignores_case():
    assert is_void_element('IMG')
    assert is_void_element('br')
    assert not is_void_element('div')
    result = levels('<div class="a"><IMG class="icon"><span class="label"></span></div>')
    assert result['label'] == 1

def test_duplicates_emitted_once_at_first_level():
    result = assign('<div class="a"><p class="x"></p></div><p class="x"></p>')
    assert [c.class_name for c in result] == ['a', 'x']
    assert result[1] == LeveledClass('p', 'x', 1)

def test_repeated_class_still_makes_frame_class_bearing():
    result = levels('<div class="a"></div><div class="a"><p class="b"></p></div>')
    assert result == {'a': 0, 'b': 1}

def test_multiple_classes_on_one_tag_share_level_and_tag():
    result = assign('<div class="wrap"><p class="text lead"></p></div>')
    assert result == [
        LeveledClass('div', 'wrap', 0),
        LeveledClass('p', 'text', 1),
        LeveledClass('p', 'lead', 1),
    ]

def test_ignored_classes_are_dropped():
    result = levels('<div class="a js-hook"><p class="b"></p></div>', ignored=['js-hook'])
    assert result == {'a': 0, 'b': 1}

def test_tag_with_only_ignored_classes_adds_no_depth():
    result = levels('<div class="js-hook"><p class="b"></p></div>', ignored={'js-hook'})
    assert result == {'b': 0}

def test_extra_close_tags_are_absorbed():
    result = levels('</div></div><div class="a"></div></span><p class="b"></p>')
    assert result == {'a': 0, 'b': 0}

def test_unclosed_tags_are_abandoned():
    result = levels('<div class="a"><div class="b"><div class="c">')
    assert result == {'a': 0, 'b': 1, 'c': 2}

def test_class_without_open_tag_is_dropped():
    events = [ClassOccurrence(0, 'orphan'), TagOpen(1, 'div'), ClassOccurrence(5, 'a'), TagClose(10)]
    assert LevelAssigner().assign(events) == [LeveledClass('div', 'a', 0)]

def test_empty_and_classless_markup():
    assert assign('') == []
    assert assign('<div><p>Hello</p></div>') == []

def test_list_item_hooks_disabled_by_default():
    result = assign('<ul class="menu"><li></li></ul>')
    assert result == [LeveledClass('ul', 'menu', 0)]

def test_list_item_hook_for_classless_items():
    result = assign('<ul class="menu"><li><a class="link"></a></li><li></li></ul>', list_item_hooks=True)
    assert result == [
        LeveledClass('ul', 'menu', 0),
        LeveledClass('ul', 'menu', 1, child_tag='li'),
        LeveledClass('a', 'link', 1),
    ]

def test_list_item_hook_skipped_for_items_with_classes():
    result = assign('<ol class="steps"><li class="step"></li></ol>', list_item_hooks=True)
    assert result == [LeveledClass('ol', 'steps', 0), LeveledClass('li', 'step', 1)]

def test_list_item_hook_requires_list_parent_with_class():
    assert assign('<ul><li></li></ul>', list_item_hooks=True) == []
    result = assign('<div class="box"><li></li></div>', list_item_hooks=True)
    assert result == [LeveledClass('div', 'box', 0)]

def test_list_item_hook_for_unclosed_item_at_end():
    result = assign('<ul class="menu"><li>', list_item_hooks=True)
    assert result[-1] == LeveledClass('ul', 'menu', 1, child_tag='li')
