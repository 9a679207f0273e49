"""
Migration inicial do Portal.

Cria as tabelas:
- subjects: Matérias
- pdfs: Materiais em PDF
- youtube_videos: Vídeos do YouTube
- contacts: Mensagens de contato
"""

from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):
    """Migration inicial."""

    initial = True

    dependencies = [
    ]

    operations = [
        # =================================================================
        # Tabela: subjects
        # =================================================================
        migrations.CreateModel(
            name='SubjectModel',
            fields=[
                ('id', models.CharField(
                    max_length=36,
                    primary_key=True,
                    serialize=False,
                    editable=False,
                    help_text='UUID da matéria'
                )),
                ('name', models.CharField(
                    max_length=100,
                    unique=True,
                    help_text='Nome da matéria'
                )),
                ('description', models.TextField(
                    null=True,
                    blank=True,
                    help_text='Descrição opcional'
                )),
                ('created_at', models.DateTimeField(
                    default=django.utils.timezone.now,
                    db_index=True
                )),
            ],
            options={
                'verbose_name': 'Subject',
                'verbose_name_plural': 'Subjects',
                'db_table': 'subjects',
                'ordering': ['name'],
            },
        ),

        # =================================================================
        # Tabela: pdfs
        # =================================================================
        migrations.CreateModel(
            name='PdfModel',
            fields=[
                ('id', models.CharField(max_length=36, primary_key=True, serialize=False, editable=False)),
                ('title', models.CharField(max_length=200)),
                ('description', models.TextField(null=True, blank=True)),
                ('file_path', models.CharField(max_length=255)),
                ('file_url', models.CharField(max_length=500)),
                ('file_size', models.BigIntegerField(default=0)),
                ('uploaded_by', models.CharField(max_length=100, null=True, blank=True, db_index=True)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now, db_index=True)),
                ('subject', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='pdfs',
                    to='portal.subjectmodel',
                    help_text='Matéria do material'
                )),
            ],
            options={
                'verbose_name': 'PDF',
                'verbose_name_plural': 'PDFs',
                'db_table': 'pdfs',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['subject', 'created_at'], name='pdfs_subject_created_idx'),
                ],
            },
        ),

        # =================================================================
        # Tabela: youtube_videos
        # =================================================================
        migrations.CreateModel(
            name='VideoModel',
            fields=[
                ('id', models.CharField(max_length=36, primary_key=True, serialize=False, editable=False)),
                ('title', models.CharField(max_length=200)),
                ('description', models.TextField(null=True, blank=True)),
                ('youtube_url', models.CharField(max_length=500)),
                ('video_id', models.CharField(max_length=11, db_index=True)),
                ('added_by', models.CharField(max_length=100, null=True, blank=True)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now, db_index=True)),
                ('subject', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='videos',
                    to='portal.subjectmodel'
                )),
            ],
            options={
                'verbose_name': 'YouTube video',
                'verbose_name_plural': 'YouTube videos',
                'db_table': 'youtube_videos',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['subject', 'created_at'], name='videos_subject_created_idx'),
                ],
            },
        ),

        # =================================================================
        # Tabela: contacts
        # =================================================================
        migrations.CreateModel(
            name='ContactModel',
            fields=[
                ('id', models.CharField(max_length=36, primary_key=True, serialize=False, editable=False)),
                ('name', models.CharField(max_length=100)),
                ('email', models.CharField(max_length=255)),
                ('message', models.TextField()),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now, db_index=True)),
            ],
            options={
                'verbose_name': 'Contact message',
                'verbose_name_plural': 'Contact messages',
                'db_table': 'contacts',
                'ordering': ['-created_at'],
            },
        ),
    ]
