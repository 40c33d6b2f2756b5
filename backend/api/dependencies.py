"""Shared dependencies for API routes."""

from fastapi import HTTPException

from config import settings
from models.schemas.keywords import CategoryDictionary
from services.lexicons import DEFAULT_DICTIONARY


def get_dictionary() -> CategoryDictionary:
    return DEFAULT_DICTIONARY


def get_suggestion_limit(limit: int | None = None) -> int:
    if limit is None:
        return settings.role_suggestion_limit
    if limit < 1 or limit > 100:
        raise HTTPException(status_code=400, detail="limit must be between 1 and 100")
    return limit
