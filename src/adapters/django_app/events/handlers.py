"""
Event Handlers - Processadores de Eventos de Domínio.

Executados de forma assíncrona via Celery quando o publisher
está em modo ``celery``. Cada evento de Pessoa gera uma linha
de auditoria e uma métrica.

Padrão:
    @shared_task(bind=True, ...)
    def handle_<evento>(self, event_data: dict) -> None:
        ...

``event_data`` é o resultado de ``DomainEvent.to_dict()``; os
campos específicos do evento ficam em ``event_data["data"]``.
"""

import logging
from datetime import datetime
from typing import Any, Dict

from celery import shared_task

logger = logging.getLogger(__name__)


# =============================================================================
# Event Handlers - Pessoas
# =============================================================================

@shared_task(
    bind=True,
    max_retries=3,
    default_retry_delay=60,
    acks_late=True,
)
def handle_pessoa_criada(self, event_data: Dict[str, Any]) -> None:
    """
    Handler para PessoaCriadaEvent.

    Registra auditoria do cadastro e incrementa a métrica
    ``pessoas_cadastradas``.
    """
    pessoa_id = event_data.get('aggregate_id')
    dados = event_data.get('data', {})

    logger.info(
        f"[AUDIT] PessoaCriada: {pessoa_id} | "
        f"Nome: {dados.get('nome')} | Email: {dados.get('email')}"
    )

    record_metric.delay(metric_name='pessoas_cadastradas', value=1)


@shared_task(
    bind=True,
    max_retries=3,
    default_retry_delay=60,
    acks_late=True,
)
def handle_pessoa_atualizada(self, event_data: Dict[str, Any]) -> None:
    """Handler para PessoaAtualizadaEvent."""
    pessoa_id = event_data.get('aggregate_id')
    dados = event_data.get('data', {})

    logger.info(
        f"[AUDIT] PessoaAtualizada: {pessoa_id} | "
        f"Nome: {dados.get('nome')} | Email: {dados.get('email')}"
    )

    record_metric.delay(metric_name='pessoas_atualizadas', value=1)


@shared_task(
    bind=True,
    max_retries=3,
    default_retry_delay=60,
    acks_late=True,
)
def handle_pessoa_removida(self, event_data: Dict[str, Any]) -> None:
    """Handler para PessoaRemovidaEvent."""
    pessoa_id = event_data.get('aggregate_id')

    logger.info(f"[AUDIT] PessoaRemovida: {pessoa_id}")

    record_metric.delay(metric_name='pessoas_removidas', value=1)


# =============================================================================
# Event Dispatcher (Router)
# =============================================================================

EVENT_HANDLERS = {
    'PessoaCriadaEvent': handle_pessoa_criada,
    'PessoaAtualizadaEvent': handle_pessoa_atualizada,
    'PessoaRemovidaEvent': handle_pessoa_removida,
}


@shared_task(bind=True, max_retries=5, default_retry_delay=30)
def dispatch_domain_event(self, event_type: str, event_data: Dict[str, Any]) -> bool:
    """
    Dispatcher central para Domain Events.

    Roteia o evento para o handler do seu tipo.

    Returns:
        True se havia handler para o tipo
    """
    handler = EVENT_HANDLERS.get(event_type)

    if handler:
        logger.info(f"[DISPATCHER] Roteando {event_type} para handler")
        handler.delay(event_data)
        return True

    logger.warning(f"[DISPATCHER] Handler não encontrado para {event_type}")
    return False


# =============================================================================
# Metric Tasks
# =============================================================================

@shared_task(bind=True, ignore_result=True)
def record_metric(
    self,
    metric_name: str,
    value: float,
    tags: Dict[str, str] = None
) -> None:
    """Registra métrica no log."""
    logger.info(f"[METRIC] {metric_name}={value} | tags={tags or {}}")


# =============================================================================
# Scheduled Tasks (Beat)
# =============================================================================

@shared_task(bind=True)
def generate_daily_report(self) -> Dict[str, Any]:
    """
    Gera relatório diário do cadastro.

    Executada diariamente pelo Celery Beat.
    """
    logger.info("[SCHEDULED] Gerando relatório diário...")

    from src.config.container import get_container

    container = get_container()
    pessoas = container.listar_pessoas_service().execute()

    report = {
        'data': datetime.now().isoformat(),
        'total_pessoas': len(pessoas),
    }

    logger.info(f"[SCHEDULED] Relatório gerado: {report}")
    record_metric.delay(metric_name='pessoas_total', value=len(pessoas))

    return report
