"""
Testes de Integração End-to-End sem banco.

Fluxo completo pelo TestingContainer:
- Service → Validador → Repositório em memória
- UnitOfWork → Publisher em memória → eventos
"""

from datetime import date, datetime

import pytest
from dependency_injector import providers

from src.config.container import TestingContainer
from src.core.pessoas.dtos import CriarPessoaInputDTO
from src.core.shared.exceptions import ValidationError


pytestmark = pytest.mark.integration


@pytest.fixture
def container():
    container = TestingContainer()
    container.relogio.override(providers.Object(lambda: datetime(2024, 6, 15, 12, 0)))
    yield container
    container.relogio.reset_override()


def dto(nome, email, cpf, data_nascimento=date(1990, 1, 1)):
    return CriarPessoaInputDTO(
        nome=nome, email=email, cpf=cpf, data_nascimento=data_nascimento
    )


class TestCadastroCompleto:

    def test_dois_cadastros_listados_por_nome(self, container):
        criar = container.criar_pessoa_service()

        criar.execute(dto("Zélia Campos", "zelia@example.com", "12345678909"))
        criar.execute(dto("Bruno Lima", "bruno@example.com", "98765432100"))

        pessoas = container.listar_pessoas_service().execute()

        assert [p.nome for p in pessoas] == ["Bruno Lima", "Zélia Campos"]
        assert [p.cpf_formatado for p in pessoas] == ["987.654.321-00", "123.456.789-09"]

    def test_eventos_publicados_apos_cada_cadastro(self, container):
        criar = container.criar_pessoa_service()

        criar.execute(dto("Ana", "ana@example.com", "12345678909"))
        criar.execute(dto("Bruno", "bruno@example.com", "98765432100"))

        publisher = container.event_publisher()
        assert len(publisher.get_events_by_type("PessoaCriadaEvent")) == 2

    def test_cpf_invalido_nao_e_gravado(self, container):
        with pytest.raises(ValidationError) as exc_info:
            container.criar_pessoa_service().execute(
                dto("Ana", "ana@example.com", "12345678901")
            )

        assert "CPF inválido" in exc_info.value.errors
        assert container.pessoa_repository().count() == 0
        assert container.event_publisher().published_events == []

    def test_segundo_cadastro_com_mesmo_cpf(self, container):
        criar = container.criar_pessoa_service()
        criar.execute(dto("Ana", "ana@example.com", "529.982.247-25"))

        with pytest.raises(ValidationError) as exc_info:
            criar.execute(dto("Outra Ana", "outra@example.com", "52998224725"))

        assert exc_info.value.errors == ["CPF já cadastrado"]
        assert container.pessoa_repository().count() == 1

    def test_menor_de_idade_na_data_do_relogio(self, container):
        criar = container.criar_pessoa_service()

        with pytest.raises(ValidationError) as exc_info:
            criar.execute(dto("Caio", "caio@example.com", "11144477735", date(2006, 6, 16)))
        assert exc_info.value.errors == ["Pessoa deve ser maior de idade"]

        output = criar.execute(dto("Caio", "caio@example.com", "11144477735", date(2006, 6, 15)))
        assert output.id is not None
