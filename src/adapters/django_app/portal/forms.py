"""
Django Forms do Portal.

Forms são DRIVING ADAPTERS: renderizam os campos e coletam a entrada
bruta. A validação fica nos schemas do Core
(src/core/portal/schemas.py); os erros voltam para o form via
`apply_errors`.

Por isso todos os campos são opcionais e não fazem strip aqui:
o trim é decisão de cada schema (senhas não são aparadas).
"""

from typing import Dict, Iterable

from django import forms


def _text(label: str, placeholder: str = '', **attrs) -> forms.CharField:
    return forms.CharField(
        label=label,
        required=False,
        strip=False,
        widget=forms.TextInput(attrs={'class': 'form-control', 'placeholder': placeholder, **attrs}),
    )


def _textarea(label: str, rows: int = 4, placeholder: str = '') -> forms.CharField:
    return forms.CharField(
        label=label,
        required=False,
        strip=False,
        widget=forms.Textarea(attrs={'class': 'form-control', 'rows': rows, 'placeholder': placeholder}),
    )


class PortalForm(forms.Form):
    """Base: encaminha erros do Core para os campos do form."""

    def apply_errors(self, errors: Dict[str, str]) -> None:
        for field_name, message in errors.items():
            self.add_error(field_name if field_name in self.fields else None, message)


class SubjectChoiceMixin:
    """Preenche o select de matérias a partir dos SubjectOutputDTO."""

    def set_subject_choices(self, subjects: Iterable) -> None:
        self.fields['subject_id'].widget.choices = [('', 'Select a subject')] + [
            (s.id, s.name) for s in subjects
        ]


# =============================================================================
# FORMULÁRIOS PÚBLICOS
# =============================================================================

class ContactForm(PortalForm):
    name = _text('Name', 'Your name')
    email = _text('Email', 'you@example.com', type='email')
    message = _textarea('Message', rows=6, placeholder='How can we help?')


class SignUpForm(PortalForm):
    full_name = _text('Full name', 'Your full name')
    email = _text('Email', 'you@example.com', type='email')
    password = forms.CharField(
        label='Password',
        required=False,
        strip=False,
        widget=forms.PasswordInput(attrs={'class': 'form-control'}),
    )


class SignInForm(PortalForm):
    email = _text('Email', 'you@example.com', type='email')
    password = forms.CharField(
        label='Password',
        required=False,
        strip=False,
        widget=forms.PasswordInput(attrs={'class': 'form-control'}),
    )


# =============================================================================
# FORMULÁRIOS DO PAINEL
# =============================================================================

class SubjectForm(PortalForm):
    name = _text('Subject name', 'e.g. Mathematics')
    description = _textarea('Description', rows=3)


class PdfUploadForm(SubjectChoiceMixin, PortalForm):
    title = _text('PDF title')
    description = _textarea('Description', rows=3)
    subject_id = forms.CharField(
        label='Subject',
        required=False,
        widget=forms.Select(attrs={'class': 'form-control'}),
    )
    file = forms.FileField(
        label='PDF file',
        required=False,
        widget=forms.ClearableFileInput(attrs={'class': 'form-control', 'accept': 'application/pdf'}),
    )


class VideoForm(SubjectChoiceMixin, PortalForm):
    title = _text('Video title')
    description = _textarea('Description', rows=3)
    subject_id = forms.CharField(
        label='Subject',
        required=False,
        widget=forms.Select(attrs={'class': 'form-control'}),
    )
    youtube_url = _text('YouTube URL', 'https://www.youtube.com/watch?v=...')
