"""
Django Models do Portal.

Estes models são ADAPTERS - persistem as entidades definidas em
src/core/portal/entities.py. Nomes de tabela seguem o store externo:
subjects, pdfs, youtube_videos, contacts.

IMPORTANTE:
- Models NÃO contêm lógica de negócio
- Conversão Entity ↔ Model fica nos Mappers
"""

from django.db import models
from django.utils import timezone


class SubjectModel(models.Model):
    """
    Matéria.

    Fields:
        id: UUID como primary key (gerado pela Entity)
        name: Nome único
        description: Descrição opcional
        created_at: Timestamp de criação
    """

    id = models.CharField(
        max_length=36,
        primary_key=True,
        editable=False,
        help_text="UUID da matéria"
    )

    name = models.CharField(
        max_length=100,
        unique=True,
        help_text="Nome da matéria"
    )

    description = models.TextField(
        null=True,
        blank=True,
        help_text="Descrição opcional"
    )

    created_at = models.DateTimeField(
        default=timezone.now,
        db_index=True,
    )

    class Meta:
        db_table = 'subjects'
        verbose_name = 'Subject'
        verbose_name_plural = 'Subjects'
        ordering = ['name']

    def __str__(self):
        return self.name


class PdfModel(models.Model):
    """
    Material em PDF de uma matéria.

    Fields:
        file_path: Nome do arquivo no storage
        file_url: URL pública
        file_size: Tamanho em bytes
        uploaded_by: ID do admin (string para flexibilidade)
    """

    id = models.CharField(max_length=36, primary_key=True, editable=False)

    subject = models.ForeignKey(
        SubjectModel,
        on_delete=models.CASCADE,
        related_name='pdfs',
        help_text="Matéria do material"
    )

    title = models.CharField(max_length=200)

    description = models.TextField(null=True, blank=True)

    file_path = models.CharField(max_length=255)

    file_url = models.CharField(max_length=500)

    file_size = models.BigIntegerField(default=0)

    uploaded_by = models.CharField(
        max_length=100,
        null=True,
        blank=True,
        db_index=True,
    )

    created_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        db_table = 'pdfs'
        verbose_name = 'PDF'
        verbose_name_plural = 'PDFs'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['subject', 'created_at'], name='pdfs_subject_created_idx'),
        ]

    def __str__(self):
        return self.title


class VideoModel(models.Model):
    """Vídeo do YouTube de uma matéria (ID de 11 caracteres extraído da URL)."""

    id = models.CharField(max_length=36, primary_key=True, editable=False)

    subject = models.ForeignKey(
        SubjectModel,
        on_delete=models.CASCADE,
        related_name='videos',
    )

    title = models.CharField(max_length=200)

    description = models.TextField(null=True, blank=True)

    youtube_url = models.CharField(max_length=500)

    video_id = models.CharField(max_length=11, db_index=True)

    added_by = models.CharField(max_length=100, null=True, blank=True)

    created_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        db_table = 'youtube_videos'
        verbose_name = 'YouTube video'
        verbose_name_plural = 'YouTube videos'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['subject', 'created_at'], name='videos_subject_created_idx'),
        ]

    def __str__(self):
        return self.title


class ContactModel(models.Model):
    """Mensagem do formulário de contato."""

    id = models.CharField(max_length=36, primary_key=True, editable=False)

    name = models.CharField(max_length=100)

    email = models.CharField(max_length=255)

    message = models.TextField()

    created_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        db_table = 'contacts'
        verbose_name = 'Contact message'
        verbose_name_plural = 'Contact messages'
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.name} <{self.email}>"
