"""
AutoclassCSS
Generates skeleton CSS stylesheets from the classes found in HTML markup.
"""

from .errors import ConfigurationError
from .generator import Autoclasscss, generate_skeleton, leveled_classes
from .level_assigner import LevelAssigner, LeveledClass
from .render_config import RenderConfig
from .skeleton_renderer import SkeletonRenderer
from .structure_extractor import ClassOccurrence, StructureExtractor, TagClose, TagOpen

__version__ = '0.1.0'

__all__ = [
    'Autoclasscss',
    'ClassOccurrence',
    'ConfigurationError',
    'LevelAssigner',
    'LeveledClass',
    'RenderConfig',
    'SkeletonRenderer',
    'StructureExtractor',
    'TagClose',
    'TagOpen',
    'generate_skeleton',
    'leveled_classes',
]
