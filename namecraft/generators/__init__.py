from .affix_generator import AffixGenerator
from .compound_generator import CompoundGenerator
from .spelling_generator import SpellingGenerator

__all__ = ['AffixGenerator', 'CompoundGenerator', 'SpellingGenerator']
