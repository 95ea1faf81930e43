"""Tests for response schemas and the LangChain-backed service."""

import pytest

from namecraft.ai import LangChainGenerationService, NamingAssistant
from namecraft.ai.schemas import ProductIdea, RankedName, SeedWords, TierName, TierNames
from namecraft.exceptions import GenerationServiceError

from .conftest import FakeGenerationService


class FakeStructuredModel:
    def __init__(self, result):
        self.result = result
        self.messages = None

    async def ainvoke(self, messages):
        self.messages = messages
        return self.result


class FakeChatModel:
    """Minimal stand-in for a LangChain chat model."""

    def __init__(self, result):
        self.structured = FakeStructuredModel(result)
        self.schema = None

    def with_structured_output(self, schema):
        self.schema = schema
        return self.structured


class TestSchemas:
    """Tests for score coercion on model responses."""

    def test_score_from_string(self):
        assert RankedName(name='Zentrova', score='85.4').score == 85

    def test_score_clamped(self):
        assert RankedName(name='Zentrova', score=150).score == 100
        assert ProductIdea(name='Loopdesk', score=-3).score == 0

    def test_seed_words_default_empty(self):
        seeds = SeedWords()
        assert seeds.core == []
        assert seeds.action == []


class TestLangChainGenerationService:
    """Tests for the structured-output adapter."""

    @pytest.mark.asyncio
    async def test_returns_schema_instance(self):
        llm = FakeChatModel(SeedWords(core=['sky']))
        result = await LangChainGenerationService(llm).generate(SeedWords, 'prompt')
        assert result.core == ['sky']
        assert llm.schema is SeedWords

    @pytest.mark.asyncio
    async def test_validates_dict_results(self):
        llm = FakeChatModel({'core': ['sky'], 'related': ['orbit']})
        result = await LangChainGenerationService(llm).generate(SeedWords, 'prompt')
        assert isinstance(result, SeedWords)
        assert result.related == ['orbit']

    @pytest.mark.asyncio
    async def test_sends_system_and_user_messages(self):
        llm = FakeChatModel(SeedWords())
        await LangChainGenerationService(llm).generate(SeedWords, 'name my startup')
        assert len(llm.structured.messages) == 2
        assert llm.structured.messages[1].content == 'name my startup'

    @pytest.mark.asyncio
    async def test_empty_result_raises(self):
        llm = FakeChatModel(None)
        with pytest.raises(GenerationServiceError):
            await LangChainGenerationService(llm).generate(SeedWords, 'prompt')


class TestNamingAssistant:
    """Tests for prompt construction."""

    @pytest.mark.asyncio
    async def test_tier_prompt(self):
        service = FakeGenerationService({TierNames: TierNames(tiers=[
            TierName(name='Spark', description='Free forever', target='Hobbyists'),
        ])})
        tiers = await NamingAssistant(service).tier_names('Loopdesk', style='playful', count=3)
        assert tiers[0].name == 'Spark'
        assert 'Generate 3 pricing tier names for a product called "Loopdesk"' in service.prompts[0]
        assert 'playful style' in service.prompts[0]

    @pytest.mark.asyncio
    async def test_seed_prompt(self, fake_service):
        await NamingAssistant(fake_service).seed_words('pet insurance')
        assert fake_service.prompts == ['Generate seed words for a startup in: pet insurance']
