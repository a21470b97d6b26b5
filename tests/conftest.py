from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from call_intelligence.app import create_app
from call_intelligence.config import OpenAIConfig, SummarizationConfig
from call_intelligence.dependencies import (
    get_interaction_log,
    get_summarizer,
    get_text_analyzer,
)
from call_intelligence.domain import (
    ChatMessage,
    EntitiesDocument,
    Entity,
    KeyPhrasesDocument,
    PiiDocument,
    TextAnalyzer,
    TranscriptSummarizer,
)
from call_intelligence.infrastructure.interfaces import (
    ChatCompletionService,
    InteractionLog,
    TextAnalyticsService,
)

# -----------------------------------------------------------------------------
# In-memory fakes for the provider interfaces
# -----------------------------------------------------------------------------


class FakeTextAnalyticsService(TextAnalyticsService):
    def __init__(self, key_phrases=None, entities=None, pii=None, error=None):
        self.key_phrase_docs = key_phrases or []
        self.entity_docs = entities or []
        self.pii_docs = pii or []
        self.error = error
        self.calls: list[tuple[str, list[str]]] = []

    def _record(self, operation, documents):
        self.calls.append((operation, documents))
        if self.error is not None:
            raise self.error

    def extract_key_phrases(self, documents):
        self._record("extract_key_phrases", documents)
        return self.key_phrase_docs

    def recognize_entities(self, documents):
        self._record("recognize_entities", documents)
        return self.entity_docs

    def recognize_pii_entities(self, documents):
        self._record("recognize_pii_entities", documents)
        return self.pii_docs


class FakeChatService(ChatCompletionService):
    """Returns queued messages in order; queued exceptions are raised."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def complete(self, messages, parameters):
        self.calls.append((messages, parameters))
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


class FakeInteractionLog(InteractionLog):
    def __init__(self):
        self.entries = []

    def record(self, transcript, instruction, result, client_address):
        self.entries.append((transcript, instruction, result, client_address))


def assistant(content: str) -> ChatMessage:
    return ChatMessage(role="assistant", content=content)


# -----------------------------------------------------------------------------
# Fixtures
# -----------------------------------------------------------------------------


@pytest.fixture()
def openai_config():
    return OpenAIConfig(
        endpoint="https://example.openai.azure.com/",
        api_key="test-key",
        deployment_name="gpt-4o-mini",
        max_tokens=50,
        temperature=0.2,
        top_p=0.9,
        frequency_penalty=0.1,
        presence_penalty=0.3,
    )


@pytest.fixture()
def text_analytics():
    return FakeTextAnalyticsService(
        key_phrases=[KeyPhrasesDocument(id="0", key_phrases=["router reset", "billing"])],
        entities=[
            EntitiesDocument(
                id="0",
                entities=[
                    Entity(text="Contoso", category="Organization", confidence_score=0.9),
                    Entity(text="Tuesday", category="DateTime", confidence_score=0.5),
                ],
            )
        ],
        pii=[PiiDocument(id="0", redacted_text="Call from ********")],
    )


@pytest.fixture()
def chat():
    return FakeChatService()


@pytest.fixture()
def interaction_log():
    return FakeInteractionLog()


@pytest.fixture()
def summarization_config():
    return SummarizationConfig()


@pytest.fixture()
def app(text_analytics, chat, interaction_log, openai_config, summarization_config):
    app = create_app()
    app.dependency_overrides[get_text_analyzer] = lambda: TextAnalyzer(text_analytics)
    app.dependency_overrides[get_summarizer] = lambda: TranscriptSummarizer(
        chat, openai_config, summarization_config
    )
    app.dependency_overrides[get_interaction_log] = lambda: interaction_log
    return app


@pytest.fixture()
def client(app):
    with TestClient(app) as c:
        yield c
