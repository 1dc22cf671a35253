"""
Use Cases (Application Services) do Domínio de Pessoas.

Use Cases implementados:
- ListarPessoasService: lista ordenada por nome
- ObterPessoaService: busca por ID
- CriarPessoaService: valida e cadastra
- AtualizarPessoaService: valida (excluindo o próprio ID) e sobrescreve
- RemoverPessoaService: remove

Toda escrita passa por ``PessoaEntity.criar`` (formato dos campos)
e depois pelo ``ValidadorPessoa`` (CPF, unicidade, idade). Falhas
viram um único ValidationError com todos os motivos.
"""

import logging
from datetime import datetime
from typing import Callable, List

from src.core.shared.interfaces import UnitOfWork
from src.core.shared.exceptions import (
    ConcurrencyError,
    EntityNotFoundError,
    ValidationError,
)

from .ports import PessoaRepository
from .entities import PessoaEntity
from .dtos import CriarPessoaInputDTO, AtualizarPessoaInputDTO, PessoaOutputDTO
from .events import PessoaCriadaEvent, PessoaAtualizadaEvent, PessoaRemovidaEvent
from .validators import ValidadorPessoa


logger = logging.getLogger(__name__)

PESSOA_NAO_ENCONTRADA = "Pessoa não encontrada"
ID_NAO_CONFERE = "ID não confere"


def _nao_encontrada(pessoa_id) -> EntityNotFoundError:
    return EntityNotFoundError(
        PESSOA_NAO_ENCONTRADA,
        entity_type="Pessoa",
        entity_id=str(pessoa_id),
    )


class ListarPessoasService:
    """Use Case: listar todas as pessoas em ordem crescente de nome."""

    def __init__(self, pessoa_repo: PessoaRepository):
        self.pessoa_repo = pessoa_repo

    def execute(self) -> List[PessoaOutputDTO]:
        return [
            PessoaOutputDTO.from_entity(p)
            for p in self.pessoa_repo.list_ordered_by_nome()
        ]


class ObterPessoaService:
    """Use Case: obter uma pessoa pelo ID."""

    def __init__(self, pessoa_repo: PessoaRepository):
        self.pessoa_repo = pessoa_repo

    def execute(self, pessoa_id: int) -> PessoaOutputDTO:
        """
        Raises:
            EntityNotFoundError: Se a pessoa não existe
        """
        pessoa = self.pessoa_repo.get_by_id(pessoa_id)
        if not pessoa:
            raise _nao_encontrada(pessoa_id)
        return PessoaOutputDTO.from_entity(pessoa)


class CriarPessoaService:
    """
    Use Case: cadastrar uma nova pessoa.

    Fluxo:
    1. Montar entidade (validação de formato)
    2. Rodar pipeline de validação sem exclusão
    3. Definir data_criacao e inserir
    4. Disparar PessoaCriadaEvent (publicado após commit)

    Example:
        service = CriarPessoaService(repo, uow, ValidadorPessoa(repo))
        output = service.execute(CriarPessoaInputDTO(
            nome="Ana", email="ana@example.com",
            cpf="12345678909", data_nascimento=date(1990, 1, 1),
        ))
    """

    def __init__(
        self,
        pessoa_repo: PessoaRepository,
        uow: UnitOfWork,
        validador: ValidadorPessoa,
        relogio: Callable[[], datetime] = datetime.now,
    ):
        self.pessoa_repo = pessoa_repo
        self.uow = uow
        self.validador = validador
        self.relogio = relogio

    def execute(self, input_dto: CriarPessoaInputDTO) -> PessoaOutputDTO:
        """
        Raises:
            ValidationError: Campos malformados ou pipeline rejeitou
            ConcurrencyError: Conflito de unicidade detectado pelo banco
        """
        with self.uow:
            pessoa = PessoaEntity.criar(
                nome=input_dto.nome,
                email=input_dto.email,
                cpf=input_dto.cpf,
                data_nascimento=input_dto.data_nascimento,
            )

            erros = self.validador.validar(pessoa)
            if erros:
                logger.info(f"Cadastro rejeitado: {erros}")
                raise ValidationError(erros[0], errors=erros)

            pessoa.marcar_criacao(self.relogio())
            self.pessoa_repo.insert(pessoa)

            self.uow.publish_event(
                PessoaCriadaEvent(
                    aggregate_id=pessoa.id,
                    nome=pessoa.nome,
                    email=pessoa.email,
                )
            )

        logger.info(f"Pessoa {pessoa.id} cadastrada")
        return PessoaOutputDTO.from_entity(pessoa)


class AtualizarPessoaService:
    """
    Use Case: sobrescrever os dados de uma pessoa.

    O ID do payload precisa ser igual ao ID do recurso. A unicidade
    é verificada ignorando o próprio registro, então reenviar os
    mesmos dados é aceito. data_criacao nunca é alterada.

    Se o banco acusar conflito, o service verifica se o registro
    ainda existe: se sumiu, a falha vira EntityNotFoundError; se
    não, o ConcurrencyError é propagado sem alteração.
    """

    def __init__(
        self,
        pessoa_repo: PessoaRepository,
        uow: UnitOfWork,
        validador: ValidadorPessoa,
        relogio: Callable[[], datetime] = datetime.now,
    ):
        self.pessoa_repo = pessoa_repo
        self.uow = uow
        self.validador = validador
        self.relogio = relogio

    def execute(
        self,
        pessoa_id: int,
        input_dto: AtualizarPessoaInputDTO,
    ) -> PessoaOutputDTO:
        """
        Raises:
            ValidationError: ID divergente, campos malformados ou pipeline rejeitou
            EntityNotFoundError: Registro não existe
            ConcurrencyError: Conflito no banco com o registro ainda existente
        """
        if input_dto.id != pessoa_id:
            raise ValidationError(ID_NAO_CONFERE, field="id")

        with self.uow:
            pessoa = PessoaEntity.criar(
                id=pessoa_id,
                nome=input_dto.nome,
                email=input_dto.email,
                cpf=input_dto.cpf,
                data_nascimento=input_dto.data_nascimento,
            )

            erros = self.validador.validar(pessoa, excluir_id=pessoa_id)
            if erros:
                logger.info(f"Atualização da pessoa {pessoa_id} rejeitada: {erros}")
                raise ValidationError(erros[0], errors=erros)

            pessoa.marcar_atualizacao(self.relogio())

            try:
                atualizado = self.pessoa_repo.update(pessoa)
            except ConcurrencyError:
                if not self.pessoa_repo.exists(pessoa_id):
                    raise _nao_encontrada(pessoa_id)
                raise

            if not atualizado:
                raise _nao_encontrada(pessoa_id)

            gravada = self.pessoa_repo.get_by_id(pessoa_id) or pessoa

            self.uow.publish_event(
                PessoaAtualizadaEvent(
                    aggregate_id=pessoa_id,
                    nome=gravada.nome,
                    email=gravada.email,
                )
            )

        logger.info(f"Pessoa {pessoa_id} atualizada")
        return PessoaOutputDTO.from_entity(gravada)


class RemoverPessoaService:
    """Use Case: remover uma pessoa."""

    def __init__(self, pessoa_repo: PessoaRepository, uow: UnitOfWork):
        self.pessoa_repo = pessoa_repo
        self.uow = uow

    def execute(self, pessoa_id: int) -> None:
        """
        Raises:
            EntityNotFoundError: Se a pessoa não existe
        """
        with self.uow:
            if not self.pessoa_repo.delete(pessoa_id):
                raise _nao_encontrada(pessoa_id)

            self.uow.publish_event(PessoaRemovidaEvent(aggregate_id=pessoa_id))

        logger.info(f"Pessoa {pessoa_id} removida")
