"""
Repositórios Django do Portal.

Implementam os Ports de src/core/portal/ports.py usando o ORM.
São DRIVEN ADAPTERS - acionados pelos use cases.

Responsabilidades:
- Mapear entities para models e vice-versa
- Executar queries no banco via ORM
- Traduzir recusas do banco (IntegrityError) em UpstreamRejectionError
"""

from typing import List, Optional
import logging

from django.db import IntegrityError, transaction

from src.core.portal.entities import (
    ContactMessageEntity,
    PdfEntity,
    SubjectEntity,
    VideoEntity,
)
from src.core.shared.exceptions import UpstreamRejectionError

from .mappers import ContactMapper, PdfMapper, SubjectMapper, VideoMapper
from .models import ContactModel, PdfModel, SubjectModel, VideoModel

logger = logging.getLogger(__name__)


def _insert(model, operation: str, message: str) -> None:
    """
    INSERT em savepoint próprio.

    Raises:
        UpstreamRejectionError: Se o banco recusar (unique, FK...)
    """
    try:
        with transaction.atomic():
            model.save(force_insert=True)
    except IntegrityError as e:
        logger.warning(f"{operation} recusado pelo banco: {e}")
        raise UpstreamRejectionError(message, operation=operation) from e


class DjangoSubjectRepository:
    """
    Implementação Django do SubjectRepository.

    Example:
        repo = DjangoSubjectRepository()
        repo.save(SubjectEntity.create("Physics"))
        subjects = repo.list_all()  # ordenadas por nome
    """

    def save(self, subject: SubjectEntity) -> None:
        _insert(
            SubjectMapper.to_model(subject),
            operation="create_subject",
            message=f'Subject "{subject.name}" already exists',
        )
        logger.info(f"Subject saved: {subject.id}")

    def get_by_id(self, subject_id: str) -> Optional[SubjectEntity]:
        try:
            return SubjectMapper.to_entity(SubjectModel.objects.get(id=subject_id))
        except SubjectModel.DoesNotExist:
            return None

    def exists(self, subject_id: str) -> bool:
        return SubjectModel.objects.filter(id=subject_id).exists()

    def list_all(self) -> List[SubjectEntity]:
        return [SubjectMapper.to_entity(m) for m in SubjectModel.objects.order_by('name')]


class DjangoPdfRepository:
    def save(self, pdf: PdfEntity) -> None:
        _insert(
            PdfMapper.to_model(pdf),
            operation="upload_pdf",
            message="Could not save the PDF",
        )
        logger.info(f"PDF saved: {pdf.id}")

    def list_by_subject(self, subject_id: str) -> List[PdfEntity]:
        queryset = PdfModel.objects.filter(subject_id=subject_id).order_by('-created_at')
        return [PdfMapper.to_entity(m) for m in queryset]

    def count(self) -> int:
        return PdfModel.objects.count()


class DjangoVideoRepository:
    def save(self, video: VideoEntity) -> None:
        _insert(
            VideoMapper.to_model(video),
            operation="add_video",
            message="Could not save the video",
        )
        logger.info(f"Video saved: {video.id}")

    def list_by_subject(self, subject_id: str) -> List[VideoEntity]:
        queryset = VideoModel.objects.filter(subject_id=subject_id).order_by('-created_at')
        return [VideoMapper.to_entity(m) for m in queryset]

    def count(self) -> int:
        return VideoModel.objects.count()


class DjangoContactRepository:
    def save(self, contact: ContactMessageEntity) -> None:
        _insert(
            ContactMapper.to_model(contact),
            operation="submit_contact",
            message="Could not send your message",
        )

    def list_recent(self) -> List[ContactMessageEntity]:
        return [ContactMapper.to_entity(m) for m in ContactModel.objects.order_by('-created_at')]
