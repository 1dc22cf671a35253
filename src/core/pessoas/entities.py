"""
Entidades do Domínio de Pessoas.

Entidades:
- PessoaEntity: registro de uma pessoa (nome, email, CPF, nascimento)

Regras encapsuladas aqui são apenas as de formato de campo
(obrigatoriedade, tamanho, sintaxe). Regras que dependem de
outros registros ou da data atual ficam em ``validators``.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import List, Optional
import re

from src.core.shared.exceptions import ValidationError

from .validators import CPF_TAMANHO, normalizar_cpf


EMAIL_REGEX = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


@dataclass
class PessoaEntity:
    """
    Entidade de Domínio: Pessoa.

    Invariantes:
    - Nome obrigatório, até 100 caracteres
    - Email obrigatório, sintaxe válida, até 255 caracteres
    - CPF guardado sem pontuação, 11 dígitos
    - data_criacao definida uma vez e nunca alterada
    - data_atualizacao None até a primeira atualização

    Attributes:
        id: Identificador atribuído pelo repositório na inserção
        nome: Nome completo
        email: Endereço de email (único)
        cpf: CPF com 11 dígitos (único)
        data_nascimento: Data de nascimento
        data_criacao: Momento da criação
        data_atualizacao: Momento da última atualização

    Example:
        pessoa = PessoaEntity.criar(
            nome="Ana Souza",
            email="ana@example.com",
            cpf="529.982.247-25",
            data_nascimento=date(1990, 5, 17),
        )
        pessoa.cpf  # "52998224725"
    """

    nome: str = ""
    email: str = ""
    cpf: str = ""
    data_nascimento: Optional[date] = None
    id: Optional[int] = None
    data_criacao: Optional[datetime] = None
    data_atualizacao: Optional[datetime] = None

    NOME_MAX_LENGTH = 100
    EMAIL_MAX_LENGTH = 255

    @classmethod
    def criar(
        cls,
        nome: str,
        email: str,
        cpf: str,
        data_nascimento: Optional[date],
        id: Optional[int] = None,
    ) -> "PessoaEntity":
        """
        Factory method com validação de formato dos campos.

        Todos os problemas de formato são reunidos em um único
        ValidationError (atributo ``errors``).

        Raises:
            ValidationError: Se algum campo estiver malformado
        """
        erros: List[str] = []
        erros.extend(cls._validar_nome(nome))
        erros.extend(cls._validar_email(email))
        erros.extend(cls._validar_cpf(cpf))
        if data_nascimento is None:
            erros.append("Data de nascimento é obrigatória")

        if erros:
            raise ValidationError(erros[0], errors=erros)

        if isinstance(data_nascimento, datetime):
            data_nascimento = data_nascimento.date()

        return cls(
            id=id,
            nome=nome.strip(),
            email=email.strip(),
            cpf=normalizar_cpf(str(cpf).strip()),
            data_nascimento=data_nascimento,
        )

    @classmethod
    def _validar_nome(cls, nome: str) -> List[str]:
        if not nome or not nome.strip():
            return ["Nome é obrigatório"]
        if len(nome.strip()) > cls.NOME_MAX_LENGTH:
            return [f"Nome deve ter no máximo {cls.NOME_MAX_LENGTH} caracteres"]
        return []

    @classmethod
    def _validar_email(cls, email: str) -> List[str]:
        if not email or not email.strip():
            return ["Email é obrigatório"]
        email = email.strip()
        if len(email) > cls.EMAIL_MAX_LENGTH:
            return [f"Email deve ter no máximo {cls.EMAIL_MAX_LENGTH} caracteres"]
        if not EMAIL_REGEX.match(email):
            return ["Email inválido"]
        return []

    @classmethod
    def _validar_cpf(cls, cpf: str) -> List[str]:
        if not cpf or not str(cpf).strip():
            return ["CPF é obrigatório"]
        if len(normalizar_cpf(str(cpf).strip())) != CPF_TAMANHO:
            return [f"CPF deve ter {CPF_TAMANHO} dígitos"]
        return []

    def marcar_criacao(self, momento: datetime) -> None:
        """Define data_criacao; não sobrescreve valor existente."""
        if self.data_criacao is None:
            self.data_criacao = momento

    def marcar_atualizacao(self, momento: datetime) -> None:
        self.data_atualizacao = momento

    def __str__(self) -> str:
        return f"Pessoa({self.id}): {self.nome}"
