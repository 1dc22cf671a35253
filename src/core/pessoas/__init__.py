"""
Domínio de Pessoas - Cadastro com validação de CPF, idade e unicidade.

Este módulo contém:
- Entidade (PessoaEntity)
- Validações (validar_cpf, e_maior_de_idade, VerificadorUnicidade, ValidadorPessoa)
- Use Cases (Listar, Obter, Criar, Atualizar, Remover)
- Domain Events (PessoaCriada, PessoaAtualizada, PessoaRemovida)
- DTOs e Ports
"""

from .entities import PessoaEntity
from .validators import (
    validar_cpf,
    formatar_cpf,
    normalizar_cpf,
    e_maior_de_idade,
    VerificadorUnicidade,
    ValidadorPessoa,
)
from .events import PessoaCriadaEvent, PessoaAtualizadaEvent, PessoaRemovidaEvent
from .dtos import CriarPessoaInputDTO, AtualizarPessoaInputDTO, PessoaOutputDTO
from .ports import PessoaRepository, InMemoryPessoaRepository
from .use_cases import (
    ListarPessoasService,
    ObterPessoaService,
    CriarPessoaService,
    AtualizarPessoaService,
    RemoverPessoaService,
)

__all__ = [
    # Entities
    "PessoaEntity",
    # Validators
    "validar_cpf",
    "formatar_cpf",
    "normalizar_cpf",
    "e_maior_de_idade",
    "VerificadorUnicidade",
    "ValidadorPessoa",
    # Events
    "PessoaCriadaEvent",
    "PessoaAtualizadaEvent",
    "PessoaRemovidaEvent",
    # DTOs
    "CriarPessoaInputDTO",
    "AtualizarPessoaInputDTO",
    "PessoaOutputDTO",
    # Ports
    "PessoaRepository",
    "InMemoryPessoaRepository",
    # Use Cases
    "ListarPessoasService",
    "ObterPessoaService",
    "CriarPessoaService",
    "AtualizarPessoaService",
    "RemoverPessoaService",
]
