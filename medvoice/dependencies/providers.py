"""
Provider dependencies for the chat endpoint.

The model and search clients are created once at import time and shared by
every request; tests swap them through ``app.dependency_overrides``.
"""
from fastapi import Depends
from medvoice.core.config import get_settings
from medvoice.services.model_manager import ModelManager, model_manager
from medvoice.services.orchestrator import ChatOrchestrator
from medvoice.services.search_provider import TavilySearch, search_client


def get_model_manager() -> ModelManager:
    return model_manager


def get_search_client() -> TavilySearch:
    return search_client


def get_orchestrator(
    model: ModelManager = Depends(get_model_manager),
    search: TavilySearch = Depends(get_search_client)
) -> ChatOrchestrator:
    """FastAPI dependency wiring the shared clients into an orchestrator."""
    return ChatOrchestrator(model=model, search=search, settings=get_settings())


__all__ = ['get_model_manager', 'get_search_client', 'get_orchestrator']
