"""
Chat request and response schemas.

Wire names are camelCase (``chatHistory``, ``useTavily``); both the alias and
the attribute name are accepted when parsing.
"""
from pydantic import BaseModel, Field, field_validator
from typing import Optional, List
from medvoice.models.conversation import Turn


class ChatRequest(BaseModel):
    query: str = ""
    image: Optional[str] = None
    chat_history: Optional[List[Turn]] = Field(default=None, alias="chatHistory")
    use_tavily: bool = Field(default=False, alias="useTavily")

    class Config:
        populate_by_name = True

    @field_validator("query", mode="before")
    @classmethod
    def _none_query_is_empty(cls, value):
        return "" if value is None else value

    @field_validator("image", mode="before")
    @classmethod
    def _blank_image_is_absent(cls, value):
        # An empty string means no attachment
        return value or None


class ChatResponse(BaseModel):
    reply: str
    chat_history: List[Turn] = Field(alias="chatHistory")

    class Config:
        populate_by_name = True


class ErrorResponse(BaseModel):
    error: str


class StatusResponse(BaseModel):
    message: str
