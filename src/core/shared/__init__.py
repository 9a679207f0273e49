"""
Shared Domain Components.

Contém componentes compartilhados entre todos os domínios:
- Exceções de domínio
- Interfaces (Ports)
- Base class para Domain Events
"""

from .exceptions import (
    DomainException,
    ValidationError,
    FormValidationError,
    EntityNotFoundError,
    AuthenticationError,
    UpstreamRejectionError,
)
from .events import DomainEvent
from .interfaces import UnitOfWork, EventPublisher

__all__ = [
    "DomainException",
    "ValidationError",
    "FormValidationError",
    "EntityNotFoundError",
    "AuthenticationError",
    "UpstreamRejectionError",
    "DomainEvent",
    "UnitOfWork",
    "EventPublisher",
]
