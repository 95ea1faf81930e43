"""namecraft - startup and product name generation."""

__version__ = "0.1.0"

from .domains import DomainSynthesizer
from .engine import (
    NameEngine,
    generate_names,
    generate_names_with_domains,
    generate_product_names,
    get_engine,
)
from .exceptions import GenerationServiceError, InvalidOptionsError, NamecraftError
from .models import (
    DomainSuggestion,
    GeneratedName,
    GenerateOptions,
    NameWithDomain,
    Pattern,
    PatternType,
)
from .modifiers import MODIFIERS, NOT_APPLICABLE, Applied, apply_modifier
from .patterns import PATTERNS, get_pattern
from .pipeline import (
    ProductSuggestions,
    StartupNamePipeline,
    generate_creative_names,
    generate_creative_product_names,
    generate_feature_names,
    generate_naming_suite,
    generate_product_with_features,
    generate_seed_words,
    generate_startup_names,
    generate_tier_names,
    rank_names,
    validate_name,
    validate_product_name,
)
from .profiles import PRODUCT_PROFILE, PROFILES, STARTUP_PROFILE, NamingProfile
from .scoring import NameScorer, ScoringProfile
from .wordbanks.product import (
    ACTION_VERBS,
    CATEGORY_WORDS,
    DESCRIPTIVE_ADJECTIVES,
    PRODUCT_PREFIXES,
    PRODUCT_SUFFIXES,
    TIER_NAMES,
    get_category_words,
    get_tier_names,
)
from .wordbanks.startup import (
    INDUSTRY_WORDS,
    POSITIVE_WORDS,
    PREFIXES,
    SUFFIXES,
    get_all_prefixes,
    get_all_suffixes,
    get_industry_words,
)

__all__ = [
    '__version__',
    # Engine
    'NameEngine', 'get_engine', 'generate_names', 'generate_names_with_domains',
    'generate_product_names', 'DomainSynthesizer',
    # AI pipeline
    'StartupNamePipeline', 'ProductSuggestions', 'generate_startup_names',
    'generate_seed_words', 'validate_name', 'rank_names', 'generate_creative_names',
    'generate_creative_product_names', 'generate_feature_names', 'generate_tier_names',
    'generate_naming_suite', 'validate_product_name', 'generate_product_with_features',
    # Types
    'GenerateOptions', 'GeneratedName', 'NameWithDomain', 'DomainSuggestion',
    'Pattern', 'PatternType', 'NamingProfile', 'NameScorer', 'ScoringProfile',
    'Applied', 'NOT_APPLICABLE', 'MODIFIERS', 'apply_modifier',
    'NamecraftError', 'InvalidOptionsError', 'GenerationServiceError',
    # Tables
    'PATTERNS', 'get_pattern', 'STARTUP_PROFILE', 'PRODUCT_PROFILE', 'PROFILES',
    'SUFFIXES', 'PREFIXES', 'INDUSTRY_WORDS', 'POSITIVE_WORDS',
    'get_all_suffixes', 'get_all_prefixes', 'get_industry_words',
    'PRODUCT_SUFFIXES', 'PRODUCT_PREFIXES', 'CATEGORY_WORDS', 'TIER_NAMES',
    'ACTION_VERBS', 'DESCRIPTIVE_ADJECTIVES', 'get_category_words', 'get_tier_names',
]
