"""
Domain Events - base para notificações pós-commit.

Eventos representam fatos já ocorridos no portal (mensagem de contato
recebida, PDF publicado...). São enfileirados no UnitOfWork e só
publicados depois do commit, nunca antes.

Características:
- Nomeados no passado (PdfUploaded, não UploadPdf)
- ID e timestamp gerados automaticamente
- Serializáveis (to_dict) para transporte via Celery
"""

from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from typing import Any, ClassVar, Dict
import uuid


@dataclass
class DomainEvent:
    """
    Classe base para Domain Events.

    Subclasses declaram `aggregate_type` e os próprios campos;
    `_get_event_data` serializa apenas os campos da subclasse.

    Attributes:
        aggregate_id: ID do registro que originou o evento
        event_id: Identificador único do evento
        occurred_at: Momento em que o evento ocorreu (UTC)
        version: Versão do schema do evento

    Example:
        @dataclass
        class SubjectCreatedEvent(DomainEvent):
            aggregate_type: ClassVar[str] = "Subject"
            name: str = ""
    """

    aggregate_id: str = ""
    event_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 1

    aggregate_type: ClassVar[str] = ""

    _BASE_FIELDS: ClassVar[frozenset] = frozenset(
        {"aggregate_id", "event_id", "occurred_at", "version"}
    )

    def __post_init__(self):
        if not self.aggregate_id:
            raise ValueError("aggregate_id é obrigatório")

    @property
    def event_type(self) -> str:
        """Nome da classe do evento (chave de roteamento dos handlers)."""
        return self.__class__.__name__

    def to_dict(self) -> Dict[str, Any]:
        """
        Serializa evento para dicionário.

        Returns:
            Envelope com metadados e `data` específico do evento
        """
        return {
            "event_id": self.event_id,
            "event_type": self.event_type,
            "aggregate_id": self.aggregate_id,
            "aggregate_type": self.aggregate_type,
            "occurred_at": self.occurred_at.isoformat(),
            "version": self.version,
            "data": self._get_event_data(),
        }

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name not in self._BASE_FIELDS
        }

    def __repr__(self) -> str:
        return (
            f"{self.event_type}("
            f"event_id={self.event_id[:8]}..., "
            f"aggregate_id={self.aggregate_id})"
        )
