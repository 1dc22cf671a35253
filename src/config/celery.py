"""
Configuração do Celery para processamento assíncrono.

Usado para:
- Processar Domain Events de Pessoa (auditoria, métricas)
- Relatório diário agendado (beat)

Uso:
    celery -A src.config.celery worker -l INFO
    celery -A src.config.celery beat -l INFO
"""

import os
from celery import Celery
from celery.schedules import crontab
from kombu import Queue, Exchange

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'src.config.settings')

app = Celery('cadastro_pessoas')

# Broker, backend, serialização e retry vêm dos settings CELERY_*
app.config_from_object('django.conf:settings', namespace='CELERY')

app.conf.update(
    worker_send_task_events=True,
    task_send_sent_event=True,
)

app.conf.task_queues = (
    Queue('default', Exchange('default'), routing_key='default'),
    Queue('events', Exchange('events'), routing_key='events.#'),
)
app.conf.task_default_queue = 'default'

app.conf.task_routes = {
    'src.adapters.django_app.events.handlers.*': {'queue': 'events'},
}

app.autodiscover_tasks([
    'src.adapters.django_app.events',
], related_name='handlers')

app.conf.beat_schedule = {
    'daily-report': {
        'task': 'src.adapters.django_app.events.handlers.generate_daily_report',
        'schedule': crontab(hour=8, minute=0),
    },
}
