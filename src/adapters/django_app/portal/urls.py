"""
URL patterns do Portal.

Páginas:
- GET  /                 - Home
- GET  /subjects/        - Matérias e PDFs (?q=&subject=)
- GET  /videos/          - Matérias e vídeos (?q=&subject=)
- GET|POST /contact/     - Formulário de contato

Autenticação:
- GET|POST /auth/sign-up/
- GET|POST /auth/sign-in/
- POST     /auth/sign-out/

Painel (admins):
- GET  /manage/           - Abas: matérias, PDFs, vídeos, contatos
- POST /manage/subjects/  - Nova matéria
- POST /manage/pdfs/      - Envio de PDF
- POST /manage/videos/    - Novo vídeo
"""

from django.urls import path

from . import views

app_name = 'portal'

urlpatterns = [
    path('', views.HomeView.as_view(), name='home'),
    path('subjects/', views.SubjectListView.as_view(), name='subjects'),
    path('videos/', views.VideoListView.as_view(), name='videos'),
    path('contact/', views.ContactView.as_view(), name='contact'),

    # Autenticação
    path('auth/sign-up/', views.SignUpView.as_view(), name='sign_up'),
    path('auth/sign-in/', views.SignInView.as_view(), name='sign_in'),
    path('auth/sign-out/', views.SignOutView.as_view(), name='sign_out'),

    # Painel
    path('manage/', views.AdminDashboardView.as_view(), name='manage'),
    path('manage/subjects/', views.AdminSubjectCreateView.as_view(), name='manage_subjects'),
    path('manage/pdfs/', views.AdminPdfUploadView.as_view(), name='manage_pdfs'),
    path('manage/videos/', views.AdminVideoCreateView.as_view(), name='manage_videos'),
]
