"""Prompt wrappers around the generation service."""

from typing import List, Optional

from .schemas import (
    CreativeName,
    CreativeNames,
    FeatureName,
    FeatureNames,
    NameValidation,
    ProductIdea,
    ProductIdeas,
    ProductNameValidation,
    ProductNamingSuite,
    RankedName,
    RankedNames,
    SeedWords,
    TierName,
    TierNames,
)
from .service import GenerationService


class NamingAssistant:
    """Asks the generation service for seed words, creative names, and rankings."""

    def __init__(self, service: GenerationService):
        self.service = service

    # Startup names

    async def seed_words(self, concept: str) -> SeedWords:
        return await self.service.generate(
            SeedWords, f"Generate seed words for a startup in: {concept}"
        )

    async def validate_name(self, name: str) -> NameValidation:
        return await self.service.generate(
            NameValidation, f'Validate the startup name: "{name}"'
        )

    async def rank_names(self, names: List[str]) -> List[RankedName]:
        result = await self.service.generate(
            RankedNames, f"Rank these startup names from best to worst: {', '.join(names)}"
        )
        return result.ranked_names

    async def creative_names(self, concept: str, count: int = 10, style: Optional[str] = None) -> List[CreativeName]:
        style = style or 'modern'
        result = await self.service.generate(
            CreativeNames, f"Generate {count} creative {style} startup names for: {concept}"
        )
        return result.names

    # Product names

    async def creative_product_names(self, concept: str, count: int = 10, style: Optional[str] = None) -> List[ProductIdea]:
        style = style or 'modern'
        result = await self.service.generate(
            ProductIdeas, f"Generate {count} creative {style} product names for: {concept}"
        )
        return result.names

    async def feature_names(self, product_name: str, category: Optional[str] = None, count: int = 10) -> List[FeatureName]:
        result = await self.service.generate(
            FeatureNames,
            f'Generate {count} feature names for a product called "{product_name}" in the '
            f'{category or "software"} category. Features should sound like they belong to this product.'
        )
        return result.features

    async def tier_names(self, product_name: str, style: str = 'professional', count: int = 4) -> List[TierName]:
        result = await self.service.generate(
            TierNames,
            f'Generate {count} pricing tier names for a product called "{product_name}" with a '
            f'{style} style. Include free tier through enterprise.'
        )
        return result.tiers

    async def naming_suite(self, concept: str, style: str = 'modern', category: Optional[str] = None) -> ProductNamingSuite:
        prompt = (
            f"Create a complete naming suite for: {concept}\n"
            f"Style: {style}\n"
            f"Category: {category or 'software'}\n\n"
            "Include:\n"
            "1. A main product name\n"
            "2. 5-7 feature names that fit the product\n"
            "3. 4 pricing tier names (free through enterprise)\n"
            "4. A catchy tagline"
        )
        return await self.service.generate(ProductNamingSuite, prompt)

    async def validate_product_name(self, name: str) -> ProductNameValidation:
        return await self.service.generate(
            ProductNameValidation, f'Validate this product name: "{name}"'
        )
