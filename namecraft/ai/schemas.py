"""Structured response shapes requested from the generation service."""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator


def _clamp_score(value):
    # Models sometimes answer "85" or 85.0
    if isinstance(value, str):
        value = float(value.strip())
    return max(0, min(100, int(round(value))))


class SeedWords(BaseModel):
    """Categorized words that widen the keyword pool for a concept."""
    core: List[str] = Field(default_factory=list, description="Core concept words directly related to the idea")
    related: List[str] = Field(default_factory=list, description="Related concepts and synonyms")
    emotional: List[str] = Field(default_factory=list, description="Emotional and aspirational words")
    action: List[str] = Field(default_factory=list, description="Action verbs related to the concept")
    modifiers: List[str] = Field(default_factory=list, description="Descriptive modifiers and adjectives")


class CreativeName(BaseModel):
    name: str = Field(description="The generated name")
    meaning: str = Field(default='', description="What the name represents")
    style: str = Field(default='modern', description="modern | classic | playful | professional | techy")


class CreativeNames(BaseModel):
    names: List[CreativeName] = Field(default_factory=list)


class RankedName(BaseModel):
    name: str = Field(description="The name")
    score: int = Field(ge=0, le=100, description="Score 0-100")
    reasoning: str = Field(default='', description="Why this score")

    @field_validator('score', mode='before')
    @classmethod
    def _coerce_score(cls, value):
        return _clamp_score(value)


class RankedNames(BaseModel):
    ranked_names: List[RankedName] = Field(default_factory=list)


class NameValidation(BaseModel):
    """Quality assessment of a single startup name."""
    name: str
    score: int = Field(ge=0, le=100, description="Overall score 0-100")
    pronounceable: bool = Field(description="Is it easy to pronounce")
    memorable: bool = Field(description="Is it easy to remember")
    distinctive: bool = Field(description="Is it unique and distinctive")
    brand_potential: Literal['low', 'medium', 'high']
    issues: List[str] = Field(default_factory=list)
    positives: List[str] = Field(default_factory=list)
    similar_brands: List[str] = Field(default_factory=list)
    suggestions: List[str] = Field(default_factory=list)


class ProductNameValidation(BaseModel):
    """Quality assessment of a single product name."""
    name: str
    score: int = Field(ge=0, le=100)
    clarity: bool = Field(description="Is the purpose clear")
    memorable: bool
    pronounceable: bool
    issues: List[str] = Field(default_factory=list)
    strengths: List[str] = Field(default_factory=list)
    suggestions: List[str] = Field(default_factory=list)
    competitors: List[str] = Field(default_factory=list, description="Similar product names")


class ProductIdea(BaseModel):
    name: str = Field(description="The product name")
    type: Literal['product', 'feature', 'module', 'tier'] = 'product'
    reasoning: str = Field(default='', description="Why this name works for the product")
    score: int = Field(default=70, ge=0, le=100)

    @field_validator('score', mode='before')
    @classmethod
    def _coerce_score(cls, value):
        return _clamp_score(value)


class ProductIdeas(BaseModel):
    names: List[ProductIdea] = Field(default_factory=list)


class FeatureName(BaseModel):
    name: str
    description: str = Field(description="What the feature does")
    category: str = ''
    icon: Optional[str] = Field(default=None, description="Suggested icon name")


class FeatureNames(BaseModel):
    features: List[FeatureName] = Field(default_factory=list)


class TierName(BaseModel):
    name: str
    description: str = Field(description="What this tier offers")
    target: str = Field(description="Who this tier is for")


class TierNames(BaseModel):
    tiers: List[TierName] = Field(default_factory=list)


class SuiteProductName(BaseModel):
    name: str
    type: Literal['product', 'feature', 'module', 'tier'] = 'product'
    pattern: str = ''
    source_words: List[str] = Field(default_factory=list)
    score: int = Field(default=70, ge=0, le=100)
    reasoning: str = ''


class ProductNamingSuite(BaseModel):
    """Product name plus matching features, tiers, and a tagline."""
    product_name: SuiteProductName
    features: List[FeatureName] = Field(default_factory=list)
    tiers: List[TierName] = Field(default_factory=list)
    tagline: str = ''
