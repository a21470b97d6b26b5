from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from call_intelligence.domain import ChatMessage, CompletionParameters
from call_intelligence.exceptions import LLMServiceError, TextAnalyticsError
from call_intelligence.infrastructure import (
    AzureOpenAIChatService,
    AzureTextAnalyticsService,
)


def _doc_error(doc_id, message):
    return SimpleNamespace(
        id=doc_id, is_error=True, error=SimpleNamespace(code="InvalidDocument", message=message)
    )


@pytest.fixture()
def parameters():
    return CompletionParameters(
        max_tokens=1000,
        temperature=0.7,
        top_p=0.95,
        frequency_penalty=0.0,
        presence_penalty=0.0,
    )


class TestAzureTextAnalyticsService:
    def test_key_phrases_mapped_with_errors(self):
        client = MagicMock()
        client.extract_key_phrases.return_value = [
            SimpleNamespace(id="0", is_error=False, key_phrases=["late fee", "waiver"]),
            _doc_error("1", "Document text is empty."),
        ]

        service = AzureTextAnalyticsService(lambda: client)
        docs = service.extract_key_phrases(["a", ""])

        client.extract_key_phrases.assert_called_once_with(["a", ""], language="en")
        assert docs[0].key_phrases == ["late fee", "waiver"]
        assert docs[0].error is None
        assert docs[1].error == "Document text is empty."

    def test_entities_mapped(self):
        client = MagicMock()
        client.recognize_entities.return_value = [
            SimpleNamespace(
                id="0",
                is_error=False,
                entities=[
                    SimpleNamespace(text="Seattle", category="Location", confidence_score=0.88)
                ],
            )
        ]

        service = AzureTextAnalyticsService(lambda: client, language="es")
        docs = service.recognize_entities(["a"])

        client.recognize_entities.assert_called_once_with(["a"], language="es")
        entity = docs[0].entities[0]
        assert (entity.text, entity.category, entity.confidence_score) == (
            "Seattle",
            "Location",
            0.88,
        )

    def test_pii_mapped(self):
        client = MagicMock()
        client.recognize_pii_entities.return_value = [
            SimpleNamespace(id="0", is_error=False, redacted_text="SSN ***********"),
            _doc_error("1", "Invalid language code."),
        ]

        docs = AzureTextAnalyticsService(lambda: client).recognize_pii_entities(["a", "b"])

        assert docs[0].redacted_text == "SSN ***********"
        assert docs[1].error == "Invalid language code."

    def test_sdk_failure_wrapped(self):
        client = MagicMock()
        client.recognize_entities.side_effect = RuntimeError("401 Unauthorized")

        with pytest.raises(TextAnalyticsError) as exc_info:
            AzureTextAnalyticsService(lambda: client).recognize_entities(["a"])

        assert exc_info.value.operation == "recognize_entities"
        assert isinstance(exc_info.value.cause, RuntimeError)

    def test_client_created_once_on_first_call(self):
        client = MagicMock()
        client.extract_key_phrases.return_value = []
        client.recognize_entities.return_value = []
        factory = MagicMock(return_value=client)

        service = AzureTextAnalyticsService(factory)
        factory.assert_not_called()

        service.extract_key_phrases(["a"])
        service.recognize_entities(["a"])

        factory.assert_called_once_with()

    def test_client_construction_failure_wrapped(self):
        def broken_client():
            raise ValueError("Invalid URL")

        with pytest.raises(TextAnalyticsError) as exc_info:
            AzureTextAnalyticsService(broken_client).extract_key_phrases(["a"])

        assert exc_info.value.operation == "extract_key_phrases"
        assert isinstance(exc_info.value.cause, ValueError)


class TestAzureOpenAIChatService:
    def test_returns_first_choice(self, parameters):
        client = MagicMock()
        client.chat.completions.create.return_value = SimpleNamespace(
            choices=[
                SimpleNamespace(message=SimpleNamespace(role="assistant", content="first")),
                SimpleNamespace(message=SimpleNamespace(role="assistant", content="second")),
            ]
        )
        messages = [
            ChatMessage(role="system", content="sys"),
            ChatMessage(role="user", content="usr"),
        ]

        service = AzureOpenAIChatService(lambda: client, "gpt-4o-mini")
        message = service.complete(messages, parameters)

        assert message == ChatMessage(role="assistant", content="first")
        client.chat.completions.create.assert_called_once_with(
            model="gpt-4o-mini",
            messages=[
                {"role": "system", "content": "sys"},
                {"role": "user", "content": "usr"},
            ],
            max_tokens=1000,
            temperature=0.7,
            top_p=0.95,
            frequency_penalty=0.0,
            presence_penalty=0.0,
        )

    def test_api_error_wrapped(self, parameters):
        client = MagicMock()
        client.chat.completions.create.side_effect = RuntimeError("Connection error.")

        with pytest.raises(LLMServiceError, match="Connection error."):
            AzureOpenAIChatService(lambda: client, "d").complete([], parameters)

    def test_no_choices_is_an_error(self, parameters):
        client = MagicMock()
        client.chat.completions.create.return_value = SimpleNamespace(choices=[])

        with pytest.raises(LLMServiceError):
            AzureOpenAIChatService(lambda: client, "d").complete([], parameters)

    def test_client_construction_failure_wrapped(self, parameters):
        def broken_client():
            raise ValueError("Missing credentials")

        with pytest.raises(LLMServiceError, match="Missing credentials"):
            AzureOpenAIChatService(broken_client, "d").complete([], parameters)
