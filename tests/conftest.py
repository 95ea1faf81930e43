"""Shared fixtures: a scripted stand-in for the generation service."""

import pytest

from namecraft.ai.schemas import (
    CreativeName,
    CreativeNames,
    RankedName,
    RankedNames,
    SeedWords,
)


class FakeGenerationService:
    """Returns canned responses per schema and records every call in order."""

    def __init__(self, responses=None, failures=None):
        self.responses = dict(responses or {})
        self.failures = dict(failures or {})
        self.calls = []
        self.prompts = []

    async def generate(self, schema, prompt):
        self.calls.append(schema.__name__)
        self.prompts.append(prompt)
        if schema in self.failures:
            raise self.failures[schema]
        return self.responses[schema]


@pytest.fixture
def seed_words():
    return SeedWords(
        core=['sky', 'orbit'],
        related=['launch', 'rocket', 'star', 'comet', 'space', 'planet'],
        emotional=['wonder'],
        action=['fly', 'soar', 'rise', 'climb', 'boost', 'drift'],
        modifiers=['stellar'],
    )


@pytest.fixture
def creative_names():
    return CreativeNames(names=[
        CreativeName(name='Zentrova', meaning='calm orbit', style='modern'),
        CreativeName(name='Quorbly', meaning='playful orbit', style='playful'),
        CreativeName(name='Vexaro', meaning='sharp ascent', style='techy'),
    ])


@pytest.fixture
def fake_service(seed_words, creative_names):
    return FakeGenerationService({
        SeedWords: seed_words,
        CreativeNames: creative_names,
        RankedNames: RankedNames(ranked_names=[
            RankedName(name='Zentrova', score=99, reasoning='distinctive and short'),
        ]),
    })
