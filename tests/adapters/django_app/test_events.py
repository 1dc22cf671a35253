"""
Testes dos publishers e handlers de eventos.

Handlers Celery são chamados diretamente; as tasks encadeadas
(record_metric, handlers do dispatcher) são substituídas por mocks.
"""

import logging
from unittest.mock import MagicMock, patch

import pytest

from src.adapters.django_app.events import handlers
from src.adapters.django_app.events.publishers import (
    CeleryEventPublisher,
    InMemoryEventPublisher,
    LoggingEventPublisher,
    get_event_publisher,
)
from src.core.pessoas.events import (
    PessoaAtualizadaEvent,
    PessoaCriadaEvent,
    PessoaRemovidaEvent,
)


@pytest.fixture
def evento_criada():
    return PessoaCriadaEvent(aggregate_id=7, nome="Ana Souza", email="ana@example.com")


# =============================================================================
# Publishers
# =============================================================================

class TestLoggingEventPublisher:

    def test_loga_evento(self, evento_criada, caplog):
        caplog.set_level(logging.INFO)

        LoggingEventPublisher().publish(evento_criada)

        assert "[EVENT] PessoaCriadaEvent | aggregate=7" in caplog.text
        assert "ana@example.com" in caplog.text

    def test_handler_registrado_recebe_evento(self, evento_criada):
        publisher = LoggingEventPublisher()
        recebidos = []
        publisher.register_handler("PessoaCriadaEvent", recebidos.append)

        publisher.publish(evento_criada)
        publisher.publish(PessoaRemovidaEvent(aggregate_id=7))

        assert recebidos == [evento_criada]

    def test_erro_no_handler_nao_propaga(self, evento_criada):
        publisher = LoggingEventPublisher()
        publisher.register_handler("PessoaCriadaEvent", MagicMock(side_effect=RuntimeError))

        publisher.publish(evento_criada)


class TestCeleryEventPublisher:

    def test_envia_para_dispatcher(self, evento_criada):
        with patch.object(handlers, "dispatch_domain_event") as dispatch:
            CeleryEventPublisher(also_log=False).publish(evento_criada)

        event_type, payload = dispatch.delay.call_args[0]
        assert event_type == "PessoaCriadaEvent"
        assert payload["aggregate_id"] == "7"
        assert payload["data"] == {"nome": "Ana Souza", "email": "ana@example.com"}

    def test_falha_no_broker_e_logada(self, evento_criada, caplog):
        with patch.object(handlers, "dispatch_domain_event") as dispatch:
            dispatch.delay.side_effect = ConnectionError("broker fora")
            CeleryEventPublisher().publish(evento_criada)

        assert "Falha ao publicar evento no Celery" in caplog.text


class TestInMemoryEventPublisher:

    def test_publish_batch_e_filtro_por_tipo(self, evento_criada):
        publisher = InMemoryEventPublisher()

        publisher.publish_batch([
            evento_criada,
            PessoaAtualizadaEvent(aggregate_id=7, nome="Ana", email="ana@example.com"),
        ])

        assert len(publisher.published_events) == 2
        assert publisher.get_events_by_type("PessoaAtualizadaEvent")[0].nome == "Ana"

        publisher.clear()
        assert publisher.published_events == []


def test_get_event_publisher():
    assert isinstance(get_event_publisher(), LoggingEventPublisher)
    assert isinstance(get_event_publisher(use_celery=True), CeleryEventPublisher)


# =============================================================================
# Handlers
# =============================================================================

class TestHandlers:

    @pytest.mark.parametrize("evento, metrica", [
        (PessoaCriadaEvent(aggregate_id=1, nome="Ana", email="a@example.com"), "pessoas_cadastradas"),
        (PessoaAtualizadaEvent(aggregate_id=1, nome="Ana", email="a@example.com"), "pessoas_atualizadas"),
        (PessoaRemovidaEvent(aggregate_id=1), "pessoas_removidas"),
    ])
    def test_handler_registra_metrica(self, evento, metrica):
        handler = handlers.EVENT_HANDLERS[evento.event_type]

        with patch.object(handlers, "record_metric") as record_metric:
            handler(evento.to_dict())

        record_metric.delay.assert_called_once_with(metric_name=metrica, value=1)

    def test_handler_loga_auditoria(self, evento_criada, caplog):
        caplog.set_level(logging.INFO)

        with patch.object(handlers, "record_metric"):
            handlers.handle_pessoa_criada(evento_criada.to_dict())

        assert "[AUDIT] PessoaCriada: 7" in caplog.text
        assert "Nome: Ana Souza" in caplog.text

    def test_dispatcher_roteia_para_handler(self, evento_criada):
        handler = MagicMock()

        with patch.dict(handlers.EVENT_HANDLERS, {"PessoaCriadaEvent": handler}):
            roteado = handlers.dispatch_domain_event("PessoaCriadaEvent", evento_criada.to_dict())

        assert roteado is True
        handler.delay.assert_called_once_with(evento_criada.to_dict())

    def test_dispatcher_tipo_desconhecido(self):
        assert handlers.dispatch_domain_event("EventoQualquer", {}) is False

    @pytest.mark.django_db
    def test_relatorio_diario(self, pessoa_factory):
        from src.adapters.django_app.pessoas.repositories import DjangoPessoaRepository

        DjangoPessoaRepository().insert(pessoa_factory())

        with patch.object(handlers, "record_metric") as record_metric:
            report = handlers.generate_daily_report()

        assert report["total_pessoas"] == 1
        record_metric.delay.assert_called_once_with(metric_name="pessoas_total", value=1)
