"""
Domain Events do Portal.

Eventos:
- ContactMessageReceivedEvent: nova mensagem pelo formulário de contato
- SubjectCreatedEvent: admin criou uma matéria
- PdfUploadedEvent: admin publicou um PDF
- VideoAddedEvent: admin vinculou um vídeo

Publicados pelo UnitOfWork somente após commit:

    with uow:
        repo.save(contact)
        uow.publish_event(ContactMessageReceivedEvent(...))
"""

from dataclasses import dataclass
from typing import ClassVar, Optional

from src.core.shared.events import DomainEvent


@dataclass
class ContactMessageReceivedEvent(DomainEvent):
    """
    Evento: mensagem de contato recebida.

    Handlers típicos:
    - Avisar os admins do site por e-mail
    """

    aggregate_type: ClassVar[str] = "ContactMessage"

    name: str = ""
    email: str = ""
    message_preview: str = ""

    @classmethod
    def preview(cls, message: str, limit: int = 200) -> str:
        return message if len(message) <= limit else message[:limit] + "..."


@dataclass
class SubjectCreatedEvent(DomainEvent):
    aggregate_type: ClassVar[str] = "Subject"

    name: str = ""


@dataclass
class PdfUploadedEvent(DomainEvent):
    """
    Evento: PDF publicado em uma matéria.

    Attributes:
        subject_id: Matéria do PDF
        title: Título do material
        file_size: Tamanho em bytes
        uploaded_by: Admin que enviou
    """

    aggregate_type: ClassVar[str] = "Pdf"

    subject_id: str = ""
    title: str = ""
    file_size: int = 0
    uploaded_by: Optional[str] = None


@dataclass
class VideoAddedEvent(DomainEvent):
    aggregate_type: ClassVar[str] = "Video"

    subject_id: str = ""
    title: str = ""
    video_id: str = ""
    added_by: Optional[str] = None
