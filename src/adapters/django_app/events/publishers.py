"""
Event Publishers - Publicadores de Eventos de Domínio.

Implementações de src.core.shared.interfaces.EventPublisher:
- LoggingEventPublisher: apenas loga (modo "sync", desenvolvimento)
- CeleryEventPublisher: despacha via Celery (modo "celery", produção)
- InMemoryEventPublisher: para testes

O modo é escolhido por EVENT_PUBLISHER_MODE (settings).
"""

from typing import List
import json
import logging

from src.core.shared.events import DomainEvent
from src.core.shared.interfaces import EventPublisher

logger = logging.getLogger(__name__)

SYNC = "sync"
CELERY = "celery"


class LoggingEventPublisher(EventPublisher):
    """Publisher que apenas loga eventos; nenhum handler é executado."""

    def __init__(self, log_level: int = logging.INFO):
        self._log_level = log_level

    def publish(self, event: DomainEvent) -> None:
        event_data = event.to_dict()

        logger.log(
            self._log_level,
            f"[EVENT] {event.event_type} | "
            f"aggregate={event.aggregate_id} | "
            f"data={json.dumps(event_data, default=str)}"
        )


class CeleryEventPublisher(EventPublisher):
    """
    Publisher que envia eventos para o dispatcher Celery.

    Falha do broker é logada e não quebra a requisição.
    """

    def __init__(self, also_log: bool = True):
        self._also_log = also_log

    def publish(self, event: DomainEvent) -> None:
        event_data = json.loads(json.dumps(event.to_dict(), default=str))

        if self._also_log:
            logger.info(
                f"[EVENT->CELERY] {event.event_type} | "
                f"aggregate={event.aggregate_id}"
            )

        try:
            from src.adapters.django_app.events.handlers import dispatch_domain_event
            dispatch_domain_event.delay(event.event_type, event_data)
        except Exception as e:
            logger.error(f"Falha ao publicar evento no Celery: {e}", exc_info=True)


class InMemoryEventPublisher(EventPublisher):
    """
    Publisher em memória para testes.

    Armazena eventos publicados para verificação.
    """

    def __init__(self):
        self._published_events: List[DomainEvent] = []

    def publish(self, event: DomainEvent) -> None:
        self._published_events.append(event)

    @property
    def published_events(self) -> List[DomainEvent]:
        return self._published_events.copy()

    def clear(self) -> None:
        self._published_events.clear()


def get_event_publisher(mode: str = SYNC) -> EventPublisher:
    """
    Factory para obter o publisher do modo configurado.

    Args:
        mode: "sync" (apenas log) ou "celery"

    Raises:
        ValueError: Modo desconhecido
    """
    if mode == CELERY:
        return CeleryEventPublisher()
    if mode == SYNC:
        return LoggingEventPublisher()
    raise ValueError(f"EVENT_PUBLISHER_MODE inválido: {mode}")
