"""
Domain Events do Domínio de Pessoas.

Eventos:
- PessoaCriadaEvent: novo registro gravado
- PessoaAtualizadaEvent: registro sobrescrito
- PessoaRemovidaEvent: registro removido

Publicados pelo UnitOfWork após commit:

    with uow:
        pessoa_id = repo.insert(pessoa)
        uow.publish_event(PessoaCriadaEvent(aggregate_id=pessoa_id, ...))
"""

from dataclasses import dataclass
from typing import Any, Dict

from src.core.shared.events import DomainEvent


@dataclass
class PessoaCriadaEvent(DomainEvent):
    """
    Evento: Pessoa foi cadastrada.

    Attributes:
        nome: Nome da pessoa
        email: Email cadastrado
    """

    nome: str = ""
    email: str = ""

    @property
    def aggregate_type(self) -> str:
        return "Pessoa"


@dataclass
class PessoaAtualizadaEvent(DomainEvent):
    """Evento: dados de uma Pessoa foram sobrescritos."""

    nome: str = ""
    email: str = ""

    @property
    def aggregate_type(self) -> str:
        return "Pessoa"


@dataclass
class PessoaRemovidaEvent(DomainEvent):
    """Evento: Pessoa foi removida do cadastro."""

    @property
    def aggregate_type(self) -> str:
        return "Pessoa"

    def _get_event_data(self) -> Dict[str, Any]:
        return {}
