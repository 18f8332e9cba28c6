"""
Unit tests for the Gemini model manager.
"""
from types import SimpleNamespace
import pytest
from google.genai import types
from medvoice.core.exceptions import ModelProviderError
from medvoice.services.model_manager import ModelManager


class FakeModels:
    def __init__(self, text=None, error=None):
        self.text = text
        self.error = error
        self.requests = []

    async def generate_content(self, model, contents, config):
        self.requests.append({"model": model, "contents": contents, "config": config})
        if self.error:
            raise self.error
        return SimpleNamespace(text=self.text)


def make_manager(models):
    manager = ModelManager(api_key="", model_name="gemini-test")
    manager.client = SimpleNamespace(aio=SimpleNamespace(models=models))
    return manager


def test_missing_key_leaves_client_unset():
    assert ModelManager(api_key="").client is None


@pytest.mark.asyncio
async def test_generate_without_client_raises():
    with pytest.raises(ModelProviderError, match="not initialized"):
        await ModelManager(api_key="").generate("hello")


@pytest.mark.asyncio
async def test_generate_text_only():
    models = FakeModels(text="Stay hydrated.")
    reply = await make_manager(models).generate("User: flu?", max_tokens=80)

    assert reply == "Stay hydrated."
    request = models.requests[0]
    assert request["model"] == "gemini-test"
    assert request["contents"] == ["User: flu?"]
    assert request["config"].max_output_tokens == 80


@pytest.mark.asyncio
async def test_generate_attaches_jpeg_image():
    models = FakeModels(text="Looks like a rash.")
    await make_manager(models).generate("User: what is this?", image=b"\xff\xd8jpeg")

    prompt, part = models.requests[0]["contents"]
    assert prompt == "User: what is this?"
    assert isinstance(part, types.Part)
    assert part.inline_data.mime_type == "image/jpeg"
    assert part.inline_data.data == b"\xff\xd8jpeg"


@pytest.mark.asyncio
@pytest.mark.parametrize("text", [None, ""])
async def test_empty_text_raises(text):
    with pytest.raises(ModelProviderError, match="no text"):
        await make_manager(FakeModels(text=text)).generate("prompt")


@pytest.mark.asyncio
async def test_provider_exception_is_wrapped():
    models = FakeModels(error=RuntimeError("quota exceeded"))
    with pytest.raises(ModelProviderError, match="quota exceeded"):
        await make_manager(models).generate("prompt")
