"""
Data Transfer Objects (DTOs) do Domínio de Pessoas.

- Input DTOs: dados vindos de Forms/API, imutáveis
- Output DTO: dados para resposta (views, JSON)
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from .entities import PessoaEntity
from .validators import formatar_cpf


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class CriarPessoaInputDTO:
    """
    DTO de entrada para criar pessoa.

    Attributes:
        nome: Nome completo
        email: Email
        cpf: CPF, com ou sem pontuação
        data_nascimento: Data de nascimento
    """

    nome: str
    email: str
    cpf: str
    data_nascimento: Optional[date]

    def to_dict(self) -> dict:
        return {
            "nome": self.nome,
            "email": self.email,
            "cpf": self.cpf,
            "data_nascimento": (
                self.data_nascimento.isoformat() if self.data_nascimento else None
            ),
        }


@dataclass(frozen=True)
class AtualizarPessoaInputDTO:
    """
    DTO de entrada para atualizar pessoa.

    ``id`` deve repetir o ID do recurso sendo atualizado; o service
    rejeita a operação ("ID não confere") se divergir ou faltar.
    """

    id: Optional[int]
    nome: str
    email: str
    cpf: str
    data_nascimento: Optional[date]


# =============================================================================
# OUTPUT DTOs (Saída)
# =============================================================================

@dataclass
class PessoaOutputDTO:
    """DTO de saída com os dados completos de uma pessoa."""

    id: int
    nome: str
    email: str
    cpf: str
    data_nascimento: date
    data_criacao: Optional[datetime]
    data_atualizacao: Optional[datetime]

    @classmethod
    def from_entity(cls, entity: PessoaEntity) -> "PessoaOutputDTO":
        return cls(
            id=entity.id,
            nome=entity.nome,
            email=entity.email,
            cpf=entity.cpf,
            data_nascimento=entity.data_nascimento,
            data_criacao=entity.data_criacao,
            data_atualizacao=entity.data_atualizacao,
        )

    @property
    def cpf_formatado(self) -> str:
        return formatar_cpf(self.cpf)

    def to_dict(self) -> dict:
        """Converte para dicionário (serialização JSON)."""
        return {
            "id": self.id,
            "nome": self.nome,
            "email": self.email,
            "cpf": self.cpf,
            "data_nascimento": self.data_nascimento.isoformat(),
            "data_criacao": (
                self.data_criacao.isoformat() if self.data_criacao else None
            ),
            "data_atualizacao": (
                self.data_atualizacao.isoformat() if self.data_atualizacao else None
            ),
        }
