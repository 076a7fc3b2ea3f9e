"""Application services: tokenizer, corpus matcher, browse dispatcher."""

from app.application.services.dispatcher import ALLOWED_METHODS, BrowseDispatcher
from app.application.services.matcher import Searchable, matches
from app.application.services.tokenizer import tokenize

__all__ = [
    "ALLOWED_METHODS",
    "BrowseDispatcher",
    "Searchable",
    "matches",
    "tokenize",
]
