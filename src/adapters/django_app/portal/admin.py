"""
Django Admin do Portal.

Leitura e manutenção dos registros persistidos. O envio de PDFs e o
cadastro de vídeos passam pelo painel /manage/, que aplica a validação;
por isso PDFs e vídeos são somente leitura aqui.
"""

from django.contrib import admin
from django.utils.html import format_html

from .models import ContactModel, PdfModel, SubjectModel, VideoModel


def _short_id(obj):
    return obj.id[:8] + '...'


@admin.register(SubjectModel)
class SubjectAdmin(admin.ModelAdmin):
    list_display = ['name', 'pdf_count', 'video_count', 'created_at']
    search_fields = ['name', 'description']
    readonly_fields = ['id', 'created_at']
    ordering = ['name']

    def pdf_count(self, obj):
        return obj.pdfs.count()
    pdf_count.short_description = 'PDFs'

    def video_count(self, obj):
        return obj.videos.count()
    video_count.short_description = 'Videos'


@admin.register(PdfModel)
class PdfAdmin(admin.ModelAdmin):
    list_display = ['title', 'subject', 'size_badge', 'uploaded_by', 'created_at', 'open_link']
    list_filter = ['subject', 'created_at']
    search_fields = ['title', 'description']
    readonly_fields = [
        'id', 'subject', 'file_path', 'file_url', 'file_size', 'uploaded_by', 'created_at',
    ]
    date_hierarchy = 'created_at'

    def size_badge(self, obj):
        """Tamanho em MB; acima de 40 MB em destaque."""
        size_mb = obj.file_size / (1024 * 1024)
        color = '#dc3545' if size_mb > 40 else '#6c757d'
        return format_html(
            '<span style="background-color: {}; color: white; padding: 3px 8px; '
            'border-radius: 3px; font-size: 11px;">{} MB</span>',
            color,
            f"{size_mb:.2f}",
        )
    size_badge.short_description = 'Size'

    def open_link(self, obj):
        return format_html('<a href="{}" target="_blank">Open</a>', obj.file_url)
    open_link.short_description = 'File'


@admin.register(VideoModel)
class VideoAdmin(admin.ModelAdmin):
    list_display = ['title', 'subject', 'video_id', 'added_by', 'created_at', 'watch_link']
    list_filter = ['subject', 'created_at']
    search_fields = ['title', 'video_id', 'youtube_url']
    readonly_fields = ['id', 'subject', 'youtube_url', 'video_id', 'added_by', 'created_at']

    def watch_link(self, obj):
        return format_html(
            '<a href="https://www.youtube.com/watch?v={}" target="_blank">Watch</a>',
            obj.video_id,
        )
    watch_link.short_description = 'YouTube'


@admin.register(ContactModel)
class ContactAdmin(admin.ModelAdmin):
    list_display = ['id_short', 'name', 'email', 'created_at']
    search_fields = ['name', 'email', 'message']
    readonly_fields = ['id', 'name', 'email', 'message', 'created_at']
    ordering = ['-created_at']

    def id_short(self, obj):
        return _short_id(obj)
    id_short.short_description = 'ID'

    def has_add_permission(self, request):
        return False
