from .assistant import NamingAssistant
from .schemas import (
    CreativeName,
    FeatureName,
    NameValidation,
    ProductIdea,
    ProductNameValidation,
    ProductNamingSuite,
    RankedName,
    SeedWords,
    TierName,
)
from .service import GenerationService, LangChainGenerationService

__all__ = [
    'NamingAssistant',
    'GenerationService',
    'LangChainGenerationService',
    'CreativeName',
    'FeatureName',
    'NameValidation',
    'ProductIdea',
    'ProductNameValidation',
    'ProductNamingSuite',
    'RankedName',
    'SeedWords',
    'TierName',
]
