"""
Domínio do Portal - Matérias, PDFs, Vídeos e Contato.

Este módulo contém a lógica do portal de estudos:
- Schemas dos seis formulários (contato, cadastro, login, matéria, PDF, vídeo)
- Entidades (SubjectEntity, PdfEntity, VideoEntity, ContactMessageEntity)
- Use Cases (um por formulário e um por consulta)
- Domain Events (ContactMessageReceived, SubjectCreated, PdfUploaded, VideoAdded)
- Ports para o store externo (repositórios, arquivos, autenticação)
"""

from .entities import ContactMessageEntity, PdfEntity, SubjectEntity, VideoEntity
from .events import (
    ContactMessageReceivedEvent,
    PdfUploadedEvent,
    SubjectCreatedEvent,
    VideoAddedEvent,
)
from .schemas import (
    contact_schema,
    pdf_schema,
    sign_in_schema,
    sign_up_schema,
    subject_schema,
    video_schema,
)
from .use_cases import (
    AddVideoService,
    CreateSubjectService,
    GetSubjectService,
    ListContactsService,
    ListPdfsService,
    ListSubjectsService,
    ListVideosService,
    SignInService,
    SignUpService,
    SubmitContactService,
    UploadPdfService,
)

__all__ = [
    # Entities
    "ContactMessageEntity",
    "PdfEntity",
    "SubjectEntity",
    "VideoEntity",
    # Events
    "ContactMessageReceivedEvent",
    "PdfUploadedEvent",
    "SubjectCreatedEvent",
    "VideoAddedEvent",
    # Schemas
    "contact_schema",
    "pdf_schema",
    "sign_in_schema",
    "sign_up_schema",
    "subject_schema",
    "video_schema",
    # Use Cases
    "AddVideoService",
    "CreateSubjectService",
    "GetSubjectService",
    "ListContactsService",
    "ListPdfsService",
    "ListSubjectsService",
    "ListVideosService",
    "SignInService",
    "SignUpService",
    "SubmitContactService",
    "UploadPdfService",
]
