"""Catalog of naming patterns, for documentation and introspection."""

from types import MappingProxyType
from typing import Tuple

from .models import Pattern, PatternType


PATTERNS: Tuple[Pattern, ...] = (
    Pattern(PatternType.PREFIX_WORD, 'Prefix + Word', 'Add a prefix to a base word',
            ('QuickBooks', 'SmartSheet', 'NetFlix'), 15),
    Pattern(PatternType.WORD_SUFFIX, 'Word + Suffix', 'Add a suffix to a base word',
            ('Cloudify', 'Spotify', 'Shopify'), 20),
    Pattern(PatternType.PREFIX_WORD_SUFFIX, 'Prefix + Word + Suffix',
            'Sandwich a word between prefix and suffix', ('SuperCloudly', 'MegaDataHub'), 5),
    Pattern(PatternType.COMPOUND, 'Compound Word', 'Combine two words',
            ('MailChimp', 'DropBox', 'SalesForce'), 25),
    Pattern(PatternType.PORTMANTEAU, 'Portmanteau', 'Blend parts of two words',
            ('Instagram', 'Pinterest', 'Groupon'), 10),
    Pattern(PatternType.MODIFIED, 'Modified Spelling', 'Modify the spelling of a word',
            ('Flickr', 'Tumblr', 'Lyft'), 15),
    Pattern(PatternType.INVENTED, 'Invented Word', 'Create a new word that sounds good',
            ('Spotify', 'Hulu', 'Venmo'), 5),
    Pattern(PatternType.REAL_WORD, 'Real Word', 'Use an existing word in a new context',
            ('Slack', 'Square', 'Stripe'), 10),
    Pattern(PatternType.ACRONYM, 'Acronym', 'Use letters from a phrase',
            ('IBM', 'AWS', 'SaaS'), 3),
    Pattern(PatternType.LETTER_WORD, 'Letter + Word', 'Single letter prefix before word',
            ('iCloud', 'eCommerce', 'xFactor'), 7),
    Pattern(PatternType.WORD_LETTER, 'Word + Letter/Number', 'Word followed by letter or number',
            ('Web3', 'GPT4', 'Stripe2'), 5),
    Pattern(PatternType.ACTION_OBJECT, 'Action + Object', 'Verb followed by the thing it acts on',
            ('AutoSync', 'QuickSave', 'TrackTask'), 10),
    Pattern(PatternType.ADJECTIVE_NOUN, 'Adjective + Noun', 'Descriptive adjective before a noun',
            ('SmartSearch', 'QuickView'), 10),
)

PATTERNS_BY_TYPE = MappingProxyType({p.type: p for p in PATTERNS})


def get_pattern(pattern_type) -> Pattern:
    return PATTERNS_BY_TYPE[PatternType(pattern_type)]
