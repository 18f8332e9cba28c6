"""
Chat endpoints.
"""
from fastapi import APIRouter, Depends
from medvoice.core.config import get_settings
from medvoice.core.exceptions import ChatError, UnexpectedError
from medvoice.dependencies.providers import get_orchestrator
from medvoice.schemas.chat import ChatRequest, ChatResponse, ErrorResponse, StatusResponse
from medvoice.services.orchestrator import ChatOrchestrator
import logging

logger = logging.getLogger(__name__)

settings = get_settings()
router = APIRouter(prefix=settings.API_PREFIX)


@router.get("/chat", response_model=StatusResponse)
async def chat_status():
    """Liveness check for the chat API."""
    return StatusResponse(message="Chat API POST response OK with data")


@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={500: {"model": ErrorResponse}}
)
async def chat_completion(
    request: ChatRequest,
    orchestrator: ChatOrchestrator = Depends(get_orchestrator)
):
    """Answer one user turn, optionally augmented with web search."""
    logger.info("Chat request received", extra={
        "query_length": len(request.query),
        "has_image": request.image is not None,
        "history_length": len(request.chat_history or []),
        "use_tavily": request.use_tavily
    })
    try:
        return await orchestrator.handle(request)
    except ChatError:
        raise
    except Exception as e:
        logger.error(f"Chat completion error: {e}", exc_info=True)
        raise UnexpectedError(str(e)) from e
