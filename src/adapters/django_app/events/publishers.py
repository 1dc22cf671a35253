"""
Event Publishers - Publicadores de Eventos de Domínio.

Implementações:
- LoggingEventPublisher: apenas loga (desenvolvimento, modo ``sync``)
- CeleryEventPublisher: envia para o dispatcher Celery (modo ``celery``)
- InMemoryEventPublisher: guarda eventos para asserções em testes
"""

from typing import Callable, Dict, List
import logging
import json

from src.core.shared.events import DomainEvent
from src.core.shared.interfaces import EventPublisher

logger = logging.getLogger(__name__)


class LoggingEventPublisher(EventPublisher):
    """
    Publisher que apenas loga eventos.

    Permite registrar handlers síncronos locais por tipo de evento.
    """

    def __init__(self, log_level: int = logging.INFO):
        self._log_level = log_level
        self._handlers: Dict[str, List[Callable]] = {}

    def publish(self, event: DomainEvent) -> None:
        event_data = event.to_dict()

        logger.log(
            self._log_level,
            f"[EVENT] {event.event_type} | "
            f"aggregate={event.aggregate_id} | "
            f"data={json.dumps(event_data['data'], default=str)}"
        )

        self._dispatch_to_handlers(event)

    def register_handler(
        self,
        event_type: str,
        handler: Callable[[DomainEvent], None]
    ) -> None:
        self._handlers.setdefault(event_type, []).append(handler)

    def _dispatch_to_handlers(self, event: DomainEvent) -> None:
        for handler in self._handlers.get(event.event_type, []):
            try:
                handler(event)
            except Exception as e:
                logger.error(f"Erro em handler para {event.event_type}: {e}")


class CeleryEventPublisher(EventPublisher):
    """
    Publisher que envia eventos para Celery.

    Falha no broker é logada e não interrompe o fluxo: a escrita
    já foi confirmada quando o evento é publicado.
    """

    def __init__(self, also_log: bool = True):
        self._also_log = also_log

    def publish(self, event: DomainEvent) -> None:
        event_data = event.to_dict()

        if self._also_log:
            logger.info(
                f"[EVENT->CELERY] {event.event_type} | "
                f"aggregate={event.aggregate_id}"
            )

        try:
            from src.adapters.django_app.events.handlers import dispatch_domain_event
            dispatch_domain_event.delay(event.event_type, event_data)
        except Exception as e:
            logger.error(f"Falha ao publicar evento no Celery: {e}", exc_info=True)


class InMemoryEventPublisher(EventPublisher):
    """Publisher em memória para testes."""

    def __init__(self):
        self._published_events: List[DomainEvent] = []

    def publish(self, event: DomainEvent) -> None:
        self._published_events.append(event)

    @property
    def published_events(self) -> List[DomainEvent]:
        return self._published_events.copy()

    def clear(self) -> None:
        self._published_events.clear()

    def get_events_by_type(self, event_type: str) -> List[DomainEvent]:
        return [e for e in self._published_events if e.event_type == event_type]


def get_event_publisher(use_celery: bool = False) -> EventPublisher:
    """
    Factory para obter publisher apropriado.

    Args:
        use_celery: Se deve usar Celery para processamento assíncrono
    """
    if use_celery:
        return CeleryEventPublisher()
    return LoggingEventPublisher()
