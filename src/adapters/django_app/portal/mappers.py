"""
Mappers para conversão entre Entities (Core) e Models (Django).

Princípios:
- Mappers são stateless
- Não contêm lógica de negócio
- Tratam apenas conversão de dados
"""

from src.core.portal.entities import (
    ContactMessageEntity,
    PdfEntity,
    SubjectEntity,
    VideoEntity,
)

from .models import ContactModel, PdfModel, SubjectModel, VideoModel


class SubjectMapper:
    @staticmethod
    def to_model(entity: SubjectEntity) -> SubjectModel:
        """
        Converte SubjectEntity para SubjectModel.

        Note:
            Não chama .save() - deixa isso para o Repository
        """
        return SubjectModel(
            id=entity.id,
            name=entity.name,
            description=entity.description,
            created_at=entity.created_at,
        )

    @staticmethod
    def to_entity(model: SubjectModel) -> SubjectEntity:
        return SubjectEntity(
            id=model.id,
            name=model.name,
            description=model.description,
            created_at=model.created_at,
        )


class PdfMapper:
    @staticmethod
    def to_model(entity: PdfEntity) -> PdfModel:
        return PdfModel(
            id=entity.id,
            subject_id=entity.subject_id,
            title=entity.title,
            description=entity.description,
            file_path=entity.file_path,
            file_url=entity.file_url,
            file_size=entity.file_size,
            uploaded_by=entity.uploaded_by,
            created_at=entity.created_at,
        )

    @staticmethod
    def to_entity(model: PdfModel) -> PdfEntity:
        return PdfEntity(
            id=model.id,
            subject_id=model.subject_id,
            title=model.title,
            description=model.description,
            file_path=model.file_path,
            file_url=model.file_url,
            file_size=model.file_size,
            uploaded_by=model.uploaded_by,
            created_at=model.created_at,
        )


class VideoMapper:
    @staticmethod
    def to_model(entity: VideoEntity) -> VideoModel:
        return VideoModel(
            id=entity.id,
            subject_id=entity.subject_id,
            title=entity.title,
            description=entity.description,
            youtube_url=entity.youtube_url,
            video_id=entity.video_id,
            added_by=entity.added_by,
            created_at=entity.created_at,
        )

    @staticmethod
    def to_entity(model: VideoModel) -> VideoEntity:
        return VideoEntity(
            id=model.id,
            subject_id=model.subject_id,
            title=model.title,
            description=model.description,
            youtube_url=model.youtube_url,
            video_id=model.video_id,
            added_by=model.added_by,
            created_at=model.created_at,
        )


class ContactMapper:
    @staticmethod
    def to_model(entity: ContactMessageEntity) -> ContactModel:
        return ContactModel(
            id=entity.id,
            name=entity.name,
            email=entity.email,
            message=entity.message,
            created_at=entity.created_at,
        )

    @staticmethod
    def to_entity(model: ContactModel) -> ContactMessageEntity:
        return ContactMessageEntity(
            id=model.id,
            name=model.name,
            email=model.email,
            message=model.message,
            created_at=model.created_at,
        )
