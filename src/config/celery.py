"""
Configuração do Celery para processamento assíncrono.

O Celery é usado para:
- Processar Domain Events publicados após commit
- Notificações (e-mail aos admins quando chega contato)

Arquitetura:
- Broker: RabbitMQ (mensagens entre Django e Workers)
- Backend: Redis (resultados de tarefas)
- Workers: Processos que executam as tarefas

Uso:
    celery -A src.config.celery worker -l INFO -Q default,events,notifications
"""

import os
from celery import Celery
from kombu import Queue, Exchange

# Definir módulo de settings do Django
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'src.config.settings')

app = Celery('studyportal')

# Carrega CELERY_* do settings do Django
app.config_from_object('django.conf:settings', namespace='CELERY')

app.conf.update(
    task_serializer='json',
    accept_content=['json'],
    result_serializer='json',

    # ACK após execução (mais seguro)
    task_acks_late=True,
    task_reject_on_worker_lost=True,
    worker_prefetch_multiplier=1,

    # Monitoramento
    worker_send_task_events=True,
    task_send_sent_event=True,
)

# Filas
app.conf.task_default_queue = 'default'
app.conf.task_queues = (
    Queue('default', Exchange('default'), routing_key='default'),
    Queue('events', Exchange('events'), routing_key='events.#'),
    Queue('notifications', Exchange('notifications'), routing_key='notifications.#'),
)

# Roteamento de tarefas para filas
app.conf.task_routes = {
    'src.adapters.django_app.events.handlers.dispatch_domain_event': {'queue': 'events'},
    'src.adapters.django_app.events.handlers.handle_content_published': {'queue': 'events'},
    'src.adapters.django_app.events.handlers.handle_contact_message_received': {
        'queue': 'notifications',
    },
}

# Auto-descoberta de tarefas
app.autodiscover_tasks(['src.adapters.django_app.events'], related_name='handlers')
