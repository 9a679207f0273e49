"""
Configuração do projeto Study Portal.

Módulos:
- settings: Configurações Django
- urls: Rotas principais
- wsgi: WSGI application
- celery: Configuração Celery para eventos assíncronos
- container: Dependency Injection Container
"""

from .celery import app as celery_app

__all__ = ('celery_app',)
