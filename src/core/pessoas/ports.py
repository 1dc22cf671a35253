"""
Ports (Interfaces) do Domínio de Pessoas.

Contrato que o adapter de persistência deve cumprir, mais uma
implementação em memória usada em testes e prototipagem.

Example:
    # No Adapter (Django)
    class DjangoPessoaRepository:
        def insert(self, pessoa: PessoaEntity) -> int:
            model = PessoaMapper.to_model(pessoa)
            model.save()
            return model.id
"""

import copy
from typing import Dict, List, Optional, Protocol, runtime_checkable

from src.core.shared.exceptions import ConcurrencyError

from .entities import PessoaEntity


CAMPOS_BUSCAVEIS = ("cpf", "email")


@runtime_checkable
class PessoaRepository(Protocol):
    """
    Interface para persistência de Pessoas.

    Implementações:
    - DjangoPessoaRepository (ORM, PostgreSQL/SQLite)
    - InMemoryPessoaRepository (testes)

    Restrições de unicidade (cpf, email) são garantidas também
    pelo armazenamento: uma escrita conflitante lança
    ConcurrencyError.
    """

    def get_by_id(self, pessoa_id: int) -> Optional[PessoaEntity]:
        """Busca por ID; None se não existir."""
        ...

    def find_by(self, campo: str, valor: str) -> List[PessoaEntity]:
        """
        Busca registros cujo ``campo`` é igual a ``valor``.

        Args:
            campo: "cpf" ou "email"
            valor: Valor exato procurado
        """
        ...

    def insert(self, pessoa: PessoaEntity) -> int:
        """
        Insere novo registro.

        Returns:
            ID atribuído

        Raises:
            ConcurrencyError: Se violar restrição de unicidade
        """
        ...

    def update(self, pessoa: PessoaEntity) -> bool:
        """
        Sobrescreve o registro ``pessoa.id``.

        Returns:
            False se o registro não existe mais

        Raises:
            ConcurrencyError: Se violar restrição de unicidade
        """
        ...

    def delete(self, pessoa_id: int) -> bool:
        """Remove registro; False se não existia."""
        ...

    def list_ordered_by_nome(self) -> List[PessoaEntity]:
        """Todos os registros em ordem crescente de nome."""
        ...

    def exists(self, pessoa_id: int) -> bool:
        ...

    def count(self) -> int:
        ...


class InMemoryPessoaRepository:
    """
    Implementação em memória do PessoaRepository.

    Gera IDs sequenciais e aplica as mesmas restrições de
    unicidade do banco. Não usar em produção!
    """

    def __init__(self):
        self._pessoas: Dict[int, PessoaEntity] = {}
        self._proximo_id = 1

    def _conflita(self, pessoa: PessoaEntity) -> bool:
        return any(
            outra.id != pessoa.id
            and (outra.cpf == pessoa.cpf or outra.email == pessoa.email)
            for outra in self._pessoas.values()
        )

    def get_by_id(self, pessoa_id: int) -> Optional[PessoaEntity]:
        pessoa = self._pessoas.get(pessoa_id)
        return copy.copy(pessoa) if pessoa else None

    def find_by(self, campo: str, valor: str) -> List[PessoaEntity]:
        if campo not in CAMPOS_BUSCAVEIS:
            raise ValueError(f"Campo não pesquisável: {campo}")
        return [
            copy.copy(p) for p in self._pessoas.values()
            if getattr(p, campo) == valor
        ]

    def insert(self, pessoa: PessoaEntity) -> int:
        pessoa.id = self._proximo_id
        if self._conflita(pessoa):
            pessoa.id = None
            raise ConcurrencyError("Violação de unicidade em CPF ou email")
        self._proximo_id += 1
        self._pessoas[pessoa.id] = copy.copy(pessoa)
        return pessoa.id

    def update(self, pessoa: PessoaEntity) -> bool:
        if pessoa.id not in self._pessoas:
            return False
        if self._conflita(pessoa):
            raise ConcurrencyError("Violação de unicidade em CPF ou email")
        gravada = copy.copy(pessoa)
        gravada.data_criacao = self._pessoas[pessoa.id].data_criacao
        self._pessoas[pessoa.id] = gravada
        return True

    def delete(self, pessoa_id: int) -> bool:
        return self._pessoas.pop(pessoa_id, None) is not None

    def list_ordered_by_nome(self) -> List[PessoaEntity]:
        return [copy.copy(p) for p in sorted(self._pessoas.values(), key=lambda p: p.nome)]

    def exists(self, pessoa_id: int) -> bool:
        return pessoa_id in self._pessoas

    def count(self) -> int:
        return len(self._pessoas)

    def clear(self) -> None:
        """Limpa todos os dados (útil para testes)."""
        self._pessoas.clear()
        self._proximo_id = 1
