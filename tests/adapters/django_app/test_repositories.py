"""
Testes do DjangoPessoaRepository e do DjangoUnitOfWork.

Usam o banco SQLite em memória configurado no conftest.
"""

from datetime import date, datetime

import pytest
from django.utils import timezone

from src.adapters.django_app.pessoas.models import PessoaModel
from src.adapters.django_app.pessoas.repositories import DjangoPessoaRepository
from src.adapters.django_app.shared.unit_of_work import DjangoUnitOfWork
from src.adapters.django_app.events.publishers import InMemoryEventPublisher
from src.core.pessoas.events import PessoaCriadaEvent
from src.core.shared.exceptions import ConcurrencyError


pytestmark = pytest.mark.django_db


@pytest.fixture
def repo():
    return DjangoPessoaRepository()


def _agora():
    return timezone.make_aware(datetime(2024, 6, 15, 12, 0))


class TestDjangoPessoaRepository:

    def test_insert_preenche_id_e_data_criacao(self, repo, pessoa_factory):
        pessoa = pessoa_factory()
        pessoa.marcar_criacao(_agora())

        pessoa_id = repo.insert(pessoa)

        assert pessoa.id == pessoa_id
        assert pessoa.data_criacao == _agora()
        assert PessoaModel.objects.filter(pk=pessoa_id).exists()

    def test_get_by_id(self, repo, pessoa_factory):
        pessoa_id = repo.insert(pessoa_factory())

        encontrada = repo.get_by_id(pessoa_id)

        assert encontrada.cpf == "12345678909"
        assert encontrada.data_nascimento == date(1990, 1, 1)

    def test_get_by_id_inexistente(self, repo):
        assert repo.get_by_id(999) is None

    def test_find_by_cpf_e_email(self, repo, pessoa_factory):
        repo.insert(pessoa_factory())

        assert len(repo.find_by("cpf", "12345678909")) == 1
        assert len(repo.find_by("email", "ana@example.com")) == 1
        assert repo.find_by("cpf", "98765432100") == []

    def test_find_by_campo_nao_pesquisavel(self, repo):
        with pytest.raises(ValueError):
            repo.find_by("nome", "Ana")

    def test_cpf_duplicado_vira_concurrency_error(self, repo, pessoa_factory):
        repo.insert(pessoa_factory())

        with pytest.raises(ConcurrencyError):
            repo.insert(pessoa_factory(email="outra@example.com"))

        assert repo.count() == 1

    def test_email_duplicado_vira_concurrency_error(self, repo, pessoa_factory):
        repo.insert(pessoa_factory())

        with pytest.raises(ConcurrencyError):
            repo.insert(pessoa_factory(cpf="98765432100"))

    def test_update_preserva_data_criacao(self, repo, pessoa_factory):
        pessoa = pessoa_factory()
        pessoa.marcar_criacao(_agora())
        pessoa_id = repo.insert(pessoa)

        alterada = pessoa_factory(id=pessoa_id, nome="Ana Maria")
        alterada.marcar_atualizacao(timezone.make_aware(datetime(2024, 7, 1, 9, 0)))

        assert repo.update(alterada) is True
        gravada = repo.get_by_id(pessoa_id)
        assert gravada.nome == "Ana Maria"
        assert gravada.data_criacao == _agora()
        assert gravada.data_atualizacao is not None

    def test_update_inexistente(self, repo, pessoa_factory):
        assert repo.update(pessoa_factory(id=999)) is False

    def test_update_com_cpf_de_outro_registro(self, repo, pessoa_factory):
        repo.insert(pessoa_factory())
        segunda_id = repo.insert(
            pessoa_factory(email="bruno@example.com", cpf="98765432100")
        )

        with pytest.raises(ConcurrencyError):
            repo.update(
                pessoa_factory(id=segunda_id, email="bruno@example.com", cpf="12345678909")
            )

    def test_delete(self, repo, pessoa_factory):
        pessoa_id = repo.insert(pessoa_factory())

        assert repo.delete(pessoa_id) is True
        assert repo.delete(pessoa_id) is False
        assert repo.exists(pessoa_id) is False

    def test_list_ordered_by_nome(self, repo, pessoa_factory):
        repo.insert(pessoa_factory(nome="Carlos"))
        repo.insert(pessoa_factory(nome="Ana", email="b@example.com", cpf="98765432100"))
        repo.insert(pessoa_factory(nome="Bruno", email="c@example.com", cpf="52998224725"))

        assert [p.nome for p in repo.list_ordered_by_nome()] == ["Ana", "Bruno", "Carlos"]


class TestDjangoUnitOfWork:

    def test_commit_publica_eventos(self, repo, pessoa_factory):
        publisher = InMemoryEventPublisher()
        uow = DjangoUnitOfWork(event_publisher=publisher)

        with uow:
            pessoa_id = repo.insert(pessoa_factory())
            uow.publish_event(PessoaCriadaEvent(aggregate_id=pessoa_id, nome="Ana", email="ana@example.com"))

        assert uow.is_committed
        assert repo.exists(pessoa_id)
        assert len(publisher.get_events_by_type("PessoaCriadaEvent")) == 1

    def test_rollback_desfaz_escrita_e_descarta_eventos(self, repo, pessoa_factory):
        publisher = InMemoryEventPublisher()
        uow = DjangoUnitOfWork(event_publisher=publisher)

        with pytest.raises(RuntimeError):
            with uow:
                repo.insert(pessoa_factory())
                uow.publish_event(PessoaCriadaEvent(aggregate_id=1, nome="Ana", email="ana@example.com"))
                raise RuntimeError("falha")

        assert uow.is_rolled_back
        assert repo.count() == 0
        assert publisher.published_events == []

    def test_conflito_no_repo_nao_invalida_transacao(self, repo, pessoa_factory):
        repo.insert(pessoa_factory())

        with pytest.raises(ConcurrencyError):
            with DjangoUnitOfWork():
                repo.insert(pessoa_factory(email="outra@example.com"))

        assert repo.count() == 1
