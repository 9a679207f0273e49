"""
Views Django do Portal.

DRIVING ADAPTERS - direcionam requisições HTTP para o Core.

Responsabilidades:
- Coletar a entrada bruta (Forms)
- Invocar Use Cases via Container DI
- Encaminhar erros de campo para o form e recusas do store
  para flash messages

Princípios:
- Views são THIN (lógica mínima)
- Validação fica nos schemas do Core
- Views não acessam Models diretamente
"""

from typing import Any, Dict, Optional
import logging

from django.contrib import messages
from django.contrib.auth import get_user_model, login, logout
from django.contrib.auth.mixins import LoginRequiredMixin
from django.http import HttpRequest, HttpResponse
from django.shortcuts import redirect, render
from django.urls import reverse
from django.utils.http import url_has_allowed_host_and_scheme
from django.views import View

from src.config.container import get_container
from src.core.shared.exceptions import (
    AuthenticationError,
    DomainException,
    EntityNotFoundError,
    FormValidationError,
)

from .forms import (
    ContactForm,
    PdfUploadForm,
    SignInForm,
    SignUpForm,
    SubjectForm,
    VideoForm,
)

logger = logging.getLogger(__name__)

GENERIC_ERROR = "Something went wrong. Please try again."


# =============================================================================
# Mixins
# =============================================================================

class ContainerMixin:
    """
    Mixin que fornece acesso ao DI Container.

    Permite obter services de forma consistente em todas as views.
    """

    def get_container(self):
        return get_container()

    def get_service(self, service_name: str):
        """
        Obtém service do container.

        Args:
            service_name: Nome do provider (ex: 'upload_pdf_service')
        """
        return getattr(self.get_container(), service_name)()


class FlashMessageMixin:
    """Mixin para adicionar flash messages de forma consistente."""

    def success_message(self, request: HttpRequest, message: str) -> None:
        messages.success(request, message)

    def error_message(self, request: HttpRequest, message: str) -> None:
        messages.error(request, message)

    def form_error(self, request: HttpRequest, form, error: FormValidationError) -> None:
        """Erros de campo inline + aviso geral."""
        form.apply_errors(error.errors)
        messages.error(request, error.message)


class UserContextMixin:
    """Mixin para extrair informações do usuário do request."""

    def get_user_id(self, request: HttpRequest) -> Optional[str]:
        if request.user.is_authenticated:
            return str(request.user.pk)
        return None


class AdminRequiredMixin(LoginRequiredMixin):
    """
    Restringe a view aos admins (is_staff).

    Anônimos vão para o login; usuários sem acesso voltam para a home.
    """

    def dispatch(self, request, *args, **kwargs):
        if request.user.is_authenticated and not request.user.is_staff:
            logger.info(f"Acesso negado ao painel para usuário {request.user.pk}")
            return redirect('portal:home')
        return super().dispatch(request, *args, **kwargs)


# =============================================================================
# Páginas públicas
# =============================================================================

class HomeView(ContainerMixin, View):
    """
    Página inicial.

    GET /
    """

    template_name = 'portal/home.html'

    def get(self, request: HttpRequest) -> HttpResponse:
        subjects = self.get_service('list_subjects_service').execute()
        return render(request, self.template_name, {'subjects': subjects[:6]})


class ContactView(ContainerMixin, FlashMessageMixin, View):
    """
    Formulário de contato.

    GET /contact/ - Formulário
    POST /contact/ - Envia mensagem
    """

    template_name = 'portal/contact.html'

    def get(self, request: HttpRequest) -> HttpResponse:
        return render(request, self.template_name, {'form': ContactForm()})

    def post(self, request: HttpRequest) -> HttpResponse:
        form = ContactForm(request.POST)
        form.is_valid()

        try:
            self.get_service('submit_contact_service').execute(form.cleaned_data)
        except FormValidationError as e:
            logger.info(f"Formulário de contato rejeitado: {sorted(e.errors)}")
            self.form_error(request, form, e)
            return render(request, self.template_name, {'form': form})
        except DomainException as e:
            self.error_message(request, e.message)
            return render(request, self.template_name, {'form': form})
        except Exception as e:
            logger.exception(f"Erro inesperado no contato: {e}")
            self.error_message(request, GENERIC_ERROR)
            return render(request, self.template_name, {'form': form})

        self.success_message(request, "Message sent! We'll get back to you as soon as possible.")
        return redirect('portal:contact')


# =============================================================================
# Autenticação
# =============================================================================

class SignUpView(ContainerMixin, FlashMessageMixin, View):
    """
    Cadastro.

    GET/POST /auth/sign-up/
    """

    template_name = 'portal/sign_up.html'

    def get(self, request: HttpRequest) -> HttpResponse:
        return render(request, self.template_name, {'form': SignUpForm()})

    def post(self, request: HttpRequest) -> HttpResponse:
        form = SignUpForm(request.POST)
        form.is_valid()

        try:
            self.get_service('sign_up_service').execute(form.cleaned_data)
        except FormValidationError as e:
            self.form_error(request, form, e)
            return render(request, self.template_name, {'form': form})
        except DomainException as e:
            self.error_message(request, e.message)
            return render(request, self.template_name, {'form': form})

        self.success_message(request, "Account created! You can sign in now.")
        return redirect('portal:sign_in')


class SignInView(ContainerMixin, FlashMessageMixin, View):
    """
    Login. A sessão é aberta por django.contrib.auth.login.

    GET/POST /auth/sign-in/
    """

    template_name = 'portal/sign_in.html'

    def get(self, request: HttpRequest) -> HttpResponse:
        return render(request, self.template_name, {'form': SignInForm()})

    def post(self, request: HttpRequest) -> HttpResponse:
        form = SignInForm(request.POST)
        form.is_valid()

        try:
            user = self.get_service('sign_in_service').execute(form.cleaned_data)
        except FormValidationError as e:
            self.form_error(request, form, e)
            return render(request, self.template_name, {'form': form})
        except AuthenticationError as e:
            self.error_message(request, e.message)
            return render(request, self.template_name, {'form': form})

        account = get_user_model().objects.get(pk=user.id)
        login(request, account, backend='django.contrib.auth.backends.ModelBackend')
        logger.info(f"Login do usuário {user.id}")

        next_url = request.GET.get('next') or request.POST.get('next')
        if next_url and url_has_allowed_host_and_scheme(
            next_url, allowed_hosts={request.get_host()}, require_https=request.is_secure(),
        ):
            return redirect(next_url)
        return redirect('portal:home')


class SignOutView(View):
    """POST /auth/sign-out/"""

    def post(self, request: HttpRequest) -> HttpResponse:
        logout(request)
        return redirect('portal:home')


# =============================================================================
# Navegação por matéria (usuários autenticados)
# =============================================================================

class SubjectBrowserView(LoginRequiredMixin, ContainerMixin, FlashMessageMixin, View):
    """
    Base das páginas de matérias e de vídeos.

    GET ?q=<busca>&subject=<id>

    Lista as matérias (filtradas pela busca) e o conteúdo da
    matéria selecionada, mais recente primeiro.
    """

    template_name = ''
    content_service = ''
    content_name = 'items'
    load_error = ''

    def get(self, request: HttpRequest) -> HttpResponse:
        query = request.GET.get('q', '').strip()
        subject_id = request.GET.get('subject') or None

        try:
            subjects = self.get_service('list_subjects_service').execute(query)
        except Exception as e:
            logger.exception(f"Erro ao listar matérias: {e}")
            self.error_message(request, "Failed to load subjects")
            subjects = []

        selected = None
        items = []
        if subject_id:
            try:
                selected = self.get_service('get_subject_service').execute(subject_id)
                items = self.get_service(self.content_service).execute(selected.id)
            except EntityNotFoundError:
                self.error_message(request, "Subject not found")
            except Exception as e:
                logger.exception(f"Erro ao carregar conteúdo de {subject_id}: {e}")
                self.error_message(request, self.load_error)

        context: Dict[str, Any] = {
            'subjects': subjects,
            'selected_subject': selected,
            self.content_name: items,
            'query': query,
        }
        return render(request, self.template_name, context)


class SubjectListView(SubjectBrowserView):
    """GET /subjects/ - matérias e PDFs."""

    template_name = 'portal/subjects.html'
    content_service = 'list_pdfs_service'
    content_name = 'pdfs'
    load_error = "Failed to load PDFs"


class VideoListView(SubjectBrowserView):
    """GET /videos/ - matérias e vídeos embutidos."""

    template_name = 'portal/videos.html'
    content_service = 'list_videos_service'
    content_name = 'videos'
    load_error = "Failed to load videos"


# =============================================================================
# Painel de gestão (admins)
# =============================================================================

class AdminDashboardView(AdminRequiredMixin, ContainerMixin, View):
    """
    Painel com abas: matérias, PDFs, vídeos e mensagens de contato.

    GET /manage/?tab=subjects|pdfs|videos|contacts
    """

    template_name = 'portal/manage/dashboard.html'
    tabs = ('subjects', 'pdfs', 'videos', 'contacts')

    def get(self, request: HttpRequest) -> HttpResponse:
        return render(request, self.template_name, self.get_context(request))

    def get_context(self, request: HttpRequest, **forms) -> Dict[str, Any]:
        subjects = self.get_service('list_subjects_service').execute()

        pdf_form = forms.get('pdf_form') or PdfUploadForm()
        video_form = forms.get('video_form') or VideoForm()
        pdf_form.set_subject_choices(subjects)
        video_form.set_subject_choices(subjects)

        tab = forms.get('tab') or request.GET.get('tab')
        return {
            'tab': tab if tab in self.tabs else 'subjects',
            'subjects': subjects,
            'contacts': self.get_service('list_contacts_service').execute(),
            'stats': self.get_service('dashboard_stats_service').execute(),
            'subject_form': forms.get('subject_form') or SubjectForm(),
            'pdf_form': pdf_form,
            'video_form': video_form,
        }


class AdminActionView(AdminRequiredMixin, ContainerMixin, FlashMessageMixin, UserContextMixin, View):
    """
    Base dos POSTs do painel.

    Sucesso → flash + redirect para a aba; erro de campo → painel
    re-renderizado com o form preenchido; recusa do store → flash.
    """

    form_class = None
    form_name = ''
    tab = ''
    success_text = ''

    def run(self, request: HttpRequest, form):
        raise NotImplementedError

    def build_form(self, request: HttpRequest):
        return self.form_class(request.POST)

    def post(self, request: HttpRequest) -> HttpResponse:
        form = self.build_form(request)
        form.is_valid()

        try:
            self.run(request, form)
        except FormValidationError as e:
            logger.info(f"{self.form_name} rejeitado: {sorted(e.errors)}")
            self.form_error(request, form, e)
            return self.render_dashboard(request, form)
        except DomainException as e:
            logger.warning(f"{self.form_name} recusado: {e}")
            self.error_message(request, e.message)
            return self.render_dashboard(request, form)
        except Exception as e:
            logger.exception(f"Erro inesperado em {self.form_name}: {e}")
            self.error_message(request, GENERIC_ERROR)
            return self.render_dashboard(request, form)

        self.success_message(request, self.success_text)
        return redirect(f"{reverse('portal:manage')}?tab={self.tab}")

    def render_dashboard(self, request: HttpRequest, form) -> HttpResponse:
        dashboard = AdminDashboardView()
        context = dashboard.get_context(request, tab=self.tab, **{self.form_name: form})
        return render(request, AdminDashboardView.template_name, context, status=400)


class AdminSubjectCreateView(AdminActionView):
    """POST /manage/subjects/"""

    form_class = SubjectForm
    form_name = 'subject_form'
    tab = 'subjects'
    success_text = "Subject added successfully"

    def run(self, request, form):
        self.get_service('create_subject_service').execute(form.cleaned_data)


class AdminPdfUploadView(AdminActionView):
    """POST /manage/pdfs/ (multipart)"""

    form_class = PdfUploadForm
    form_name = 'pdf_form'
    tab = 'pdfs'
    success_text = "PDF uploaded successfully"

    def build_form(self, request):
        return PdfUploadForm(request.POST, request.FILES)

    def run(self, request, form):
        self.get_service('upload_pdf_service').execute(
            form.cleaned_data,
            uploaded_by=self.get_user_id(request),
        )


class AdminVideoCreateView(AdminActionView):
    """POST /manage/videos/"""

    form_class = VideoForm
    form_name = 'video_form'
    tab = 'videos'
    success_text = "Video added successfully"

    def run(self, request, form):
        self.get_service('add_video_service').execute(
            form.cleaned_data,
            added_by=self.get_user_id(request),
        )
