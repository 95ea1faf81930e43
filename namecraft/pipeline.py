"""AI-augmented naming pipelines.

``generate_startup_names`` runs a strictly linear sequence:

    seed words -> pattern names -> creative names -> merge
        -> (optional) ranking -> sort/truncate -> (optional) domains

Each collaborator call is awaited before the next step starts. Failures are
not caught, retried, or replaced with pattern-only results.
"""

import logging
import math
from dataclasses import dataclass, field, replace
from typing import List, Optional

from .ai import NamingAssistant
from .ai.schemas import (
    FeatureName,
    NameValidation,
    ProductIdea,
    ProductNameValidation,
    ProductNamingSuite,
    RankedName,
    SeedWords,
    TierName,
)
from .ai.service import GenerationService
from .domains import DomainSynthesizer
from .engine import NameEngine, get_engine
from .models import GeneratedName, GenerateOptions, NameWithDomain, PatternType
from .profiles import STARTUP_PROFILE
from .ranking import sort_by_score
from .wordbanks.product import get_tier_names

logger = logging.getLogger(__name__)

# Shares of the requested count filled by pattern generation and creative names
PATTERN_SHARE = 0.7
CREATIVE_SHARE = 0.3
CREATIVE_SCORE = 70
SEED_RELATED_LIMIT = 5
SEED_ACTION_LIMIT = 5
DEFAULT_COUNT = 20
DEFAULT_PRODUCT_COUNT = 10


def _assistant(service: Optional[GenerationService]) -> NamingAssistant:
    if service is None:
        from .ai.service import LangChainGenerationService
        from .config import load_config
        service = LangChainGenerationService.from_config(load_config())
    return NamingAssistant(service)


def seed_keywords(options: GenerateOptions, seeds: SeedWords) -> List[str]:
    """Caller keywords widened with the seed words' core, related, and action lists."""
    return [
        *options.keywords,
        *seeds.core,
        *seeds.related[:SEED_RELATED_LIMIT],
        *seeds.action[:SEED_ACTION_LIMIT],
    ]


def apply_rankings(names: List[GeneratedName], rankings: List[RankedName]) -> List[GeneratedName]:
    """Overwrite score and reasoning for exact-string matches; others keep theirs."""
    by_name = {r.name: r for r in rankings}
    result = []
    for n in names:
        ranking = by_name.get(n.name)
        if ranking is None:
            result.append(n)
        else:
            result.append(replace(n, score=ranking.score, reasoning=ranking.reasoning))
    return result


class StartupNamePipeline:
    """Orchestrates seed words, pattern generation, creative names, and ranking."""

    def __init__(
        self,
        assistant: NamingAssistant,
        engine: Optional[NameEngine] = None,
        domains: Optional[DomainSynthesizer] = None
    ):
        self.assistant = assistant
        self.engine = engine or get_engine(STARTUP_PROFILE)
        self.domains = domains or DomainSynthesizer()

    async def run(self, concept: str, options: Optional[GenerateOptions] = None) -> List[NameWithDomain]:
        options = options or GenerateOptions()
        count = DEFAULT_COUNT if options.count is None else options.count

        seeds = await self.assistant.seed_words(concept)
        logger.info("Seed words for %r: %d core, %d related, %d action",
                    concept, len(seeds.core), len(seeds.related), len(seeds.action))

        pattern_names = self.engine.generate_names(replace(
            options,
            keywords=seed_keywords(options, seeds),
            count=math.floor(count * PATTERN_SHARE),
        ))

        creative = await self.assistant.creative_names(
            concept, count=math.ceil(count * CREATIVE_SHARE), style=options.style
        )
        creative_names = [
            GeneratedName(
                name=c.name,
                pattern=PatternType.INVENTED,
                source_words=(),
                score=CREATIVE_SCORE,
                reasoning=c.meaning,
            )
            for c in creative
        ]

        # No cross-source dedup here, unlike the pattern-only path
        names = pattern_names + creative_names
        overlap = {n.name.lower() for n in pattern_names} & {n.name.lower() for n in creative_names}
        if overlap:
            logger.debug("Creative names repeat pattern names: %s", ', '.join(sorted(overlap)))

        if options.validate:
            rankings = await self.assistant.rank_names([n.name for n in names])
            names = apply_rankings(names, rankings)

        names = sort_by_score(names)[:count]

        if options.include_domains:
            return self.domains.enrich(names)
        return [NameWithDomain.wrap(n) for n in names]


async def generate_startup_names(
    concept: str,
    options: Optional[GenerateOptions] = None,
    service: Optional[GenerationService] = None
) -> List[NameWithDomain]:
    """Full startup naming pipeline.

    Args:
        concept: Free-text description of the startup
        options: Generation options; an unset ``count`` means 20 names
        service: Generation service; built from config when omitted
    """
    return await StartupNamePipeline(_assistant(service)).run(concept, options)


async def generate_seed_words(concept: str, service: Optional[GenerationService] = None) -> SeedWords:
    return await _assistant(service).seed_words(concept)


async def validate_name(name: str, service: Optional[GenerationService] = None) -> NameValidation:
    return await _assistant(service).validate_name(name)


async def rank_names(names: List[str], service: Optional[GenerationService] = None) -> List[RankedName]:
    return await _assistant(service).rank_names(names)


async def generate_creative_names(
    concept: str,
    count: int = 10,
    style: Optional[str] = None,
    service: Optional[GenerationService] = None
):
    return await _assistant(service).creative_names(concept, count=count, style=style)


# Product names

@dataclass
class ProductSuggestions:
    """Creative product names with features for the top pick and standard tiers."""
    products: List[GeneratedName] = field(default_factory=list)
    suggested_features: List[FeatureName] = field(default_factory=list)
    suggested_tiers: List[str] = field(default_factory=list)


def _from_idea(idea: ProductIdea) -> GeneratedName:
    return GeneratedName(
        name=idea.name,
        pattern=PatternType.INVENTED,
        source_words=(),
        score=idea.score,
        reasoning=idea.reasoning or None,
    )


async def generate_creative_product_names(
    concept: str,
    count: int = 10,
    style: Optional[str] = None,
    service: Optional[GenerationService] = None
) -> List[GeneratedName]:
    ideas = await _assistant(service).creative_product_names(concept, count=count, style=style)
    return [_from_idea(idea) for idea in ideas]


async def generate_feature_names(
    product_name: str,
    category: Optional[str] = None,
    count: int = 10,
    service: Optional[GenerationService] = None
) -> List[FeatureName]:
    return await _assistant(service).feature_names(product_name, category=category, count=count)


async def generate_tier_names(
    product_name: str,
    style: str = 'professional',
    count: int = 4,
    service: Optional[GenerationService] = None
) -> List[TierName]:
    return await _assistant(service).tier_names(product_name, style=style, count=count)


async def generate_naming_suite(
    concept: str,
    style: Optional[str] = None,
    category: Optional[str] = None,
    service: Optional[GenerationService] = None
) -> ProductNamingSuite:
    return await _assistant(service).naming_suite(concept, style=style or 'modern', category=category)


async def validate_product_name(name: str, service: Optional[GenerationService] = None) -> ProductNameValidation:
    return await _assistant(service).validate_product_name(name)


async def generate_product_with_features(
    concept: str,
    options: Optional[GenerateOptions] = None,
    service: Optional[GenerationService] = None
) -> ProductSuggestions:
    """Creative product names, features for the best one, and four tier names."""
    options = options or GenerateOptions()
    count = DEFAULT_PRODUCT_COUNT if options.count is None else options.count
    assistant = _assistant(service)

    ideas = await assistant.creative_product_names(concept, count=count)
    products = [_from_idea(idea) for idea in ideas]

    features = []
    if products:
        features = await assistant.feature_names(products[0].name, category=options.category, count=5)

    return ProductSuggestions(
        products=products,
        suggested_features=features,
        suggested_tiers=list(get_tier_names('all')[:4]),
    )
