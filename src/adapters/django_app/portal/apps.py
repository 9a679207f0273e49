"""
Configuração do Django App do Portal.
"""

from django.apps import AppConfig


class PortalConfig(AppConfig):
    """Configuração do app Portal."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'src.adapters.django_app.portal'
    label = 'portal'
    verbose_name = 'Study Portal'
