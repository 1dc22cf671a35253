"""
Repositório Django para persistência de Pessoas.

Implementa o port PessoaRepository (src/core/pessoas/ports.py)
com o ORM. Cada escrita roda em ``transaction.atomic`` próprio
(savepoint quando já há transação aberta), de modo que uma
violação de unicidade vira ConcurrencyError sem invalidar a
transação do UnitOfWork.
"""

from typing import List, Optional
import logging

from django.db import IntegrityError, transaction

from src.core.pessoas.entities import PessoaEntity
from src.core.pessoas.ports import CAMPOS_BUSCAVEIS
from src.core.shared.exceptions import ConcurrencyError

from .models import PessoaModel
from .mappers import PessoaMapper

logger = logging.getLogger(__name__)


class DjangoPessoaRepository:
    """
    Implementação Django do PessoaRepository.

    Example:
        repo = DjangoPessoaRepository()
        pessoa_id = repo.insert(pessoa)
        repo.get_by_id(pessoa_id)
        repo.list_ordered_by_nome()
    """

    def __init__(self):
        self._mapper = PessoaMapper()

    def get_by_id(self, pessoa_id: int) -> Optional[PessoaEntity]:
        try:
            model = PessoaModel.objects.get(pk=pessoa_id)
        except PessoaModel.DoesNotExist:
            logger.debug(f"Pessoa not found: {pessoa_id}")
            return None
        return self._mapper.to_entity(model)

    def find_by(self, campo: str, valor: str) -> List[PessoaEntity]:
        if campo not in CAMPOS_BUSCAVEIS:
            raise ValueError(f"Campo não pesquisável: {campo}")
        models = PessoaModel.objects.filter(**{campo: valor})
        return self._mapper.to_entity_list(models)

    def insert(self, pessoa: PessoaEntity) -> int:
        """
        Insere nova pessoa e preenche ``pessoa.id``.

        Raises:
            ConcurrencyError: Se CPF ou email já existirem no banco
        """
        model = self._mapper.to_model(pessoa)
        try:
            with transaction.atomic():
                model.save(force_insert=True)
        except IntegrityError as e:
            logger.warning(f"Insert conflict for cpf/email: {e}")
            raise ConcurrencyError("Conflito ao gravar pessoa: CPF ou email já existe") from e

        pessoa.id = model.id
        pessoa.data_criacao = model.data_criacao
        logger.info(f"Pessoa inserted: {model.id}")
        return model.id

    def update(self, pessoa: PessoaEntity) -> bool:
        """
        Sobrescreve os campos editáveis de ``pessoa.id``.

        Returns:
            False se nenhuma linha foi afetada (registro não existe)

        Raises:
            ConcurrencyError: Se CPF ou email colidirem com outro registro
        """
        try:
            with transaction.atomic():
                afetadas = PessoaModel.objects.filter(pk=pessoa.id).update(
                    **self._mapper.to_fields(pessoa)
                )
        except IntegrityError as e:
            logger.warning(f"Update conflict for pessoa {pessoa.id}: {e}")
            raise ConcurrencyError("Conflito ao gravar pessoa: CPF ou email já existe") from e

        if afetadas:
            logger.info(f"Pessoa updated: {pessoa.id}")
        else:
            logger.debug(f"Pessoa not found for update: {pessoa.id}")
        return afetadas > 0

    def delete(self, pessoa_id: int) -> bool:
        deleted_count, _ = PessoaModel.objects.filter(pk=pessoa_id).delete()

        if deleted_count > 0:
            logger.info(f"Pessoa deleted: {pessoa_id}")
            return True

        logger.debug(f"Pessoa not found for deletion: {pessoa_id}")
        return False

    def list_ordered_by_nome(self) -> List[PessoaEntity]:
        models = PessoaModel.objects.order_by('nome', 'id')
        return self._mapper.to_entity_list(models)

    def exists(self, pessoa_id: int) -> bool:
        return PessoaModel.objects.filter(pk=pessoa_id).exists()

    def count(self) -> int:
        return PessoaModel.objects.count()
