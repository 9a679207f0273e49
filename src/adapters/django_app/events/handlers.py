"""
Event Handlers - Processadores de Eventos de Domínio.

Handlers são executados via Celery quando o publisher está no
modo "celery". Nenhum handler altera o estado do portal: eles só
notificam.

Padrão:
    @shared_task(bind=True, ...)
    def handle_<evento>(self, event_data: dict) -> None:
        ...
"""

from typing import Any, Dict
import logging

from celery import shared_task
from django.core.mail import mail_admins

logger = logging.getLogger(__name__)


# =============================================================================
# Event Handlers
# =============================================================================

@shared_task(
    bind=True,
    max_retries=3,
    default_retry_delay=60,
    autoretry_for=(Exception,),
    acks_late=True,
)
def handle_contact_message_received(self, event_data: Dict[str, Any]) -> None:
    """
    Handler para ContactMessageReceivedEvent.

    Envia a mensagem aos ADMINS do site.

    Args:
        event_data: Envelope serializado do evento
    """
    data = event_data.get("data", {})
    name = data.get("name", "")
    email = data.get("email", "")

    logger.info(
        f"[HANDLER] ContactMessageReceived: {event_data.get('aggregate_id')} | "
        f"De: {email}"
    )

    mail_admins(
        subject=f"New contact message from {name}",
        message=f"From: {name} <{email}>\n\n{data.get('message_preview', '')}",
        fail_silently=False,
    )


@shared_task(bind=True, ignore_result=True)
def handle_content_published(self, event_data: Dict[str, Any]) -> None:
    """
    Handler para SubjectCreated, PdfUploaded e VideoAdded.

    Apenas registra a publicação no log dos workers.
    """
    data = event_data.get("data", {})
    logger.info(
        f"[HANDLER] {event_data.get('event_type')}: "
        f"{event_data.get('aggregate_type')} {event_data.get('aggregate_id')} | "
        f"{data.get('title') or data.get('name', '')}"
    )


# =============================================================================
# Event Dispatcher (Router)
# =============================================================================

EVENT_HANDLERS = {
    "ContactMessageReceivedEvent": handle_contact_message_received,
    "SubjectCreatedEvent": handle_content_published,
    "PdfUploadedEvent": handle_content_published,
    "VideoAddedEvent": handle_content_published,
}


@shared_task(bind=True, max_retries=5, default_retry_delay=30)
def dispatch_domain_event(self, event_type: str, event_data: Dict[str, Any]) -> None:
    """
    Dispatcher central para Domain Events.

    Args:
        event_type: Tipo do evento (ex: 'PdfUploadedEvent')
        event_data: Envelope serializado do evento
    """
    handler = EVENT_HANDLERS.get(event_type)

    if handler:
        logger.info(f"[DISPATCHER] Roteando {event_type} para handler")
        handler.delay(event_data)
    else:
        logger.warning(f"[DISPATCHER] Handler não encontrado para {event_type}")
