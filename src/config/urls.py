"""
URL Configuration do Study Portal.

Estrutura:
- /admin/  - Django Admin
- /health/ - Health check (JSON)
- /        - Portal (páginas, autenticação e painel /manage/)
"""

from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.http import JsonResponse
from django.urls import include, path


def health(request):
    return JsonResponse({'status': 'ok'})


urlpatterns = [
    # Django Admin
    path('admin/', admin.site.urls),

    # Health check
    path('health/', health, name='health'),

    # Portal
    path('', include('src.adapters.django_app.portal.urls')),
]

# Servir uploads em desenvolvimento
if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
