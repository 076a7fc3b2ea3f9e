"""Application interfaces (ports): collaborator and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from app.infrastructure or app.api.
"""

from app.application.interfaces.repositories import ICatalog, ILibrary
from app.application.interfaces.services import ITemplateRenderer

__all__ = [
    "ICatalog",
    "ILibrary",
    "ITemplateRenderer",
]
