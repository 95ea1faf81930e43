"""Orthographic modifiers that respell a base word (Flickr, Cloudify, Kool).

Every modifier is total: it returns ``Applied(word)`` when its precondition
holds and ``NOT_APPLICABLE`` otherwise. Neither case is an error.
"""

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Union


@dataclass(frozen=True)
class Applied:
    """A modifier produced a value."""
    word: str


class _NotApplicable:
    """The modifier's precondition failed."""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'NOT_APPLICABLE'

    def __bool__(self) -> bool:
        return False


NOT_APPLICABLE = _NotApplicable()

ModifierResult = Union[Applied, _NotApplicable]
Modifier = Callable[[str], ModifierResult]

_LAST_VOWEL = re.compile(r'[aeiou](?=[^aeiou]*$)', re.IGNORECASE)
_CONSONANT = re.compile(r'[bcdfghjklmnpqrstvwxyz]', re.IGNORECASE)


def drop_vowels(word: str) -> ModifierResult:
    """Drop the last vowel: flicker -> flickr."""
    if len(word) <= 3:
        return NOT_APPLICABLE
    result = _LAST_VOWEL.sub('', word, count=1)
    if result != word and len(result) >= 3:
        return Applied(result)
    return NOT_APPLICABLE


def double_consonant(word: str) -> ModifierResult:
    """Double a trailing consonant and add 'r': twit -> twittr."""
    last_char = word[-1:]
    if last_char and _CONSONANT.match(last_char):
        return Applied(word + last_char + 'r')
    return NOT_APPLICABLE


def drop_er(word: str) -> ModifierResult:
    """maker -> makr."""
    if word.endswith('er'):
        return Applied(word[:-2] + 'r')
    return NOT_APPLICABLE


def replace_s(word: str) -> ModifierResult:
    """tools -> toolz."""
    if 's' in word:
        return Applied(word.replace('s', 'z'))
    return NOT_APPLICABLE


def replace_c(word: str) -> ModifierResult:
    """cool -> kool."""
    if 'c' in word:
        return Applied(re.sub('c', 'k', word, flags=re.IGNORECASE))
    return NOT_APPLICABLE


def replace_ph(word: str) -> ModifierResult:
    """photo -> foto."""
    if 'ph' in word:
        return Applied(re.sub('ph', 'f', word, flags=re.IGNORECASE))
    return NOT_APPLICABLE


def add_ly(word: str) -> ModifierResult:
    return Applied(word + 'ly')


def _strip_e(word: str) -> str:
    return word[:-1] if word.endswith('e') else word


def add_ify(word: str) -> ModifierResult:
    """cloud -> cloudify, simple -> simplify."""
    return Applied(_strip_e(word) + 'ify')


def add_io(word: str) -> ModifierResult:
    return Applied(_strip_e(word) + 'io')


def capitalize(word: str) -> ModifierResult:
    """Upper-case the first letter, leaving the rest alone."""
    return Applied(word[:1].upper() + word[1:])


MODIFIERS = MappingProxyType({
    'drop_vowels': drop_vowels,
    'double_consonant': double_consonant,
    'drop_er': drop_er,
    'replace_s': replace_s,
    'replace_c': replace_c,
    'replace_ph': replace_ph,
    'add_ly': add_ly,
    'add_ify': add_ify,
    'add_io': add_io,
    'capitalize': capitalize,
})

# Modifiers used by the modified-spelling pattern, in application order
SPELLING_MODIFIERS = (
    'drop_vowels', 'drop_er', 'replace_s', 'replace_c', 'add_ly', 'add_ify', 'add_io',
)


def apply_modifier(word: str, modifier_name: str) -> ModifierResult:
    """Apply a modifier by name; unknown names are not applicable."""
    modifier = MODIFIERS.get(modifier_name)
    if modifier is None:
        return NOT_APPLICABLE
    return modifier(word)
