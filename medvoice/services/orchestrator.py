"""
Conversation orchestration: model answer, optional search, merge.
"""
from typing import List, Optional, Tuple
import logging

from medvoice.core.config import Settings, get_settings
from medvoice.core.exceptions import EmptyInputError, UnexpectedError
from medvoice.models.conversation import (
    MessageRole,
    Turn,
    render_transcript,
    seed_history,
    trim_history,
)
from medvoice.schemas.chat import ChatRequest, ChatResponse
from medvoice.services.model_manager import ModelManager
from medvoice.services.search_provider import TavilySearch
from medvoice.utilities.image_utils import decode_image, image_marker

logger = logging.getLogger(__name__)

MERGE_PROMPT = (
    "Please combine the following responses into one coherent and "
    "user-relevant answer:\n\nGemini: {primary}\n\nTavily Search: {answer}"
)


class ChatOrchestrator:
    """Turns one chat request into one assistant reply."""

    def __init__(
        self,
        model: ModelManager,
        search: TavilySearch,
        settings: Optional[Settings] = None
    ):
        self.model = model
        self.search = search
        self.settings = settings or get_settings()

    def prepare(self, request: ChatRequest) -> Tuple[List[Turn], Optional[bytes]]:
        """
        Build the request-scoped history with the new user turn appended.

        Returns the history and the decoded image bytes (or None).

        Raises:
            EmptyInputError: If there is neither a query nor an image
            UnexpectedError: If the image is not valid base64
        """
        history = list(request.chat_history or seed_history(self.settings.SYSTEM_PERSONA))

        text = request.query
        image_bytes = None
        if request.image:
            text += image_marker(request.image)
            try:
                image_bytes = decode_image(request.image)
            except ValueError as e:
                raise UnexpectedError(str(e)) from e
        if not text:
            raise EmptyInputError()

        history.append(Turn(role=MessageRole.USER, content=text))
        return history, image_bytes

    async def handle(self, request: ChatRequest) -> ChatResponse:
        """Run the full pipeline for a single request."""
        history, image_bytes = self.prepare(request)

        reply = await self.model.generate(
            render_transcript(history),
            image=image_bytes,
            max_tokens=self.settings.PRIMARY_MAX_TOKENS
        )

        if request.use_tavily:
            answer = await self.search.answer(request.query)
            logger.debug(f"Merging Gemini reply with search answer: {answer[:50]}")
            reply = await self.model.generate(
                MERGE_PROMPT.format(primary=reply, answer=answer),
                max_tokens=self.settings.MERGE_MAX_TOKENS
            )

        history.append(Turn(role=MessageRole.ASSISTANT, content=reply))
        history = trim_history(history, self.settings.MAX_HISTORY_TURNS)

        logger.info("Chat completion successful", extra={
            "response_length": len(reply),
            "history_length": len(history),
            "used_search": request.use_tavily
        })
        return ChatResponse(reply=reply, chat_history=history)
