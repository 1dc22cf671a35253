"""
Unit of Work - Implementação Django.

Fronteira transacional dos use cases: tudo que os repositórios
gravam dentro do bloco ``with uow`` é confirmado ou desfeito junto,
e os eventos enfileirados só são publicados após o commit.

Usa ``transaction.atomic`` (e não autocommit manual) para funcionar
aninhado em outras transações, inclusive as dos testes.
"""

from typing import List, Optional
import logging

from django.db import transaction

from src.core.shared.interfaces import UnitOfWork, EventPublisher
from src.core.shared.events import DomainEvent

logger = logging.getLogger(__name__)


class DjangoUnitOfWork(UnitOfWork):
    """
    Implementação Django do Unit of Work.

    Example:
        with DjangoUnitOfWork(event_publisher=publisher) as uow:
            repo.insert(pessoa)
            uow.publish_event(PessoaCriadaEvent(...))
        # Commit automático + eventos publicados

    Example com rollback:
        with DjangoUnitOfWork() as uow:
            repo.insert(pessoa)
            raise ValidationError("...")
        # Rollback automático, eventos descartados
    """

    def __init__(self, event_publisher: Optional[EventPublisher] = None, using: str = None):
        super().__init__()
        self._event_publisher = event_publisher
        self._using = using
        self._atomic = None
        self._committed = False
        self._rolled_back = False

    def _begin_transaction(self) -> None:
        self._committed = False
        self._rolled_back = False
        self._atomic = transaction.atomic(using=self._using)
        self._atomic.__enter__()
        logger.debug("Transaction started")

    def commit(self) -> None:
        """
        Confirma a transação e publica eventos.

        Se o commit falhar, os eventos são descartados e a
        exceção é propagada.
        """
        if self._atomic is None:
            logger.warning("Transaction already finalized")
            return

        atomic, self._atomic = self._atomic, None
        try:
            atomic.__exit__(None, None, None)
        except Exception as e:
            logger.error(f"Commit failed: {e}")
            self._rolled_back = True
            self.clear_events()
            raise

        self._committed = True
        logger.debug("Transaction committed")

        if self._events:
            self._publish_events()

    def rollback(self) -> None:
        """Desfaz a transação e descarta eventos."""
        if self._atomic is None:
            return

        atomic, self._atomic = self._atomic, None
        try:
            transaction.set_rollback(True, using=self._using)
            atomic.__exit__(None, None, None)
            logger.debug("Transaction rolled back")
        finally:
            self._rolled_back = True
            self.clear_events()

    def _publish_events(self) -> None:
        """
        Publica eventos após commit.

        Falha de publicação é logada e não desfaz a escrita,
        que já foi confirmada.
        """
        for event in self._events:
            logger.info(
                f"Publishing event: {event.event_type} "
                f"for aggregate {event.aggregate_id}"
            )

            if self._event_publisher:
                try:
                    self._event_publisher.publish(event)
                except Exception as e:
                    logger.error(f"Failed to publish event: {e}")

        self.clear_events()

    @property
    def is_committed(self) -> bool:
        return self._committed

    @property
    def is_rolled_back(self) -> bool:
        return self._rolled_back


class InMemoryUnitOfWork(UnitOfWork):
    """
    Unit of Work em memória para testes.

    Não persiste nada; registra commit/rollback e os eventos que
    teriam sido publicados. Se receber um publisher, repassa os
    eventos a ele no commit.

    Example:
        uow = InMemoryUnitOfWork()
        with uow:
            uow.publish_event(event)

        assert uow.committed
        assert len(uow.published_events) == 1
    """

    def __init__(self, event_publisher: Optional[EventPublisher] = None):
        super().__init__()
        self._event_publisher = event_publisher
        self._committed = False
        self._rolled_back = False
        self._published_events: List[DomainEvent] = []

    def _begin_transaction(self) -> None:
        pass

    def commit(self) -> None:
        self._committed = True
        self._published_events.extend(self._events)
        if self._event_publisher:
            self._event_publisher.publish_batch(list(self._events))
        self.clear_events()

    def rollback(self) -> None:
        self._rolled_back = True
        self.clear_events()

    @property
    def committed(self) -> bool:
        return self._committed

    @property
    def rolled_back(self) -> bool:
        return self._rolled_back

    @property
    def published_events(self) -> List[DomainEvent]:
        """Retorna eventos que foram 'publicados'."""
        return self._published_events

    def reset(self) -> None:
        """Reset para próximo teste."""
        self._committed = False
        self._rolled_back = False
        self._published_events.clear()
        self.clear_events()
