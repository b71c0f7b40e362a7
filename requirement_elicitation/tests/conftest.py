"""Shared fixtures for the requirement elicitation tests."""

from __future__ import annotations

import pytest

from requirement_elicitation.config import GenerationConfig
from requirement_elicitation.rules.extractor import RequirementExtractor
from requirement_elicitation.utils.ids import RequirementIdFactory


@pytest.fixture
def id_factory() -> RequirementIdFactory:
    return RequirementIdFactory(prefix="test")


@pytest.fixture
def extractor(id_factory) -> RequirementExtractor:
    return RequirementExtractor(id_factory=id_factory)


@pytest.fixture
def gemini_config() -> GenerationConfig:
    return GenerationConfig(api_key="test-key", timeout_seconds=1.0)
