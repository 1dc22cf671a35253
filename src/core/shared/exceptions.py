"""
Exceções de Domínio do Cadastro de Pessoas.

Exceções tipadas que atravessam as camadas e são traduzidas
para respostas HTTP apenas na borda (api_views).

Hierarquia:
    DomainException (base)
    ├── ValidationError (dados inválidos, agrega todos os motivos)
    ├── EntityNotFoundError (registro não existe)
    └── ConcurrencyError (conflito no armazenamento)
"""

from typing import List, Optional


class DomainException(Exception):
    """
    Exceção base para todos os erros de domínio.

    Example:
        try:
            service.execute(dto)
        except DomainException as e:
            logger.error(f"Erro de domínio: {e}")
    """

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict:
        """Serializa exceção para dicionário (útil para APIs)."""
        return {
            "error": self.code,
            "message": self.message,
        }


class ValidationError(DomainException):
    """
    Erro de validação de dados de entrada.

    Carrega a lista completa de motivos em ``errors``: o pipeline
    de validação não para na primeira falha, então o cliente
    recebe todos os problemas de uma vez.

    Example:
        erros = validador.validar(pessoa)
        if erros:
            raise ValidationError("Dados inválidos", errors=erros)
    """

    def __init__(
        self,
        message: str,
        field: str = None,
        errors: Optional[List[str]] = None,
    ):
        self.field = field
        self.errors = list(errors) if errors else [message]
        code = f"VALIDATION_ERROR_{field.upper()}" if field else "VALIDATION_ERROR"
        super().__init__(message, code)

    def to_dict(self) -> dict:
        result = super().to_dict()
        result["errors"] = list(self.errors)
        if self.field:
            result["field"] = self.field
        return result


class EntityNotFoundError(DomainException):
    """
    Entidade não encontrada no repositório.

    Example:
        pessoa = repo.get_by_id(pessoa_id)
        if not pessoa:
            raise EntityNotFoundError("Pessoa não encontrada")
    """

    def __init__(self, message: str, entity_type: str = None, entity_id: str = None):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(message, "ENTITY_NOT_FOUND")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.entity_type:
            result["entity_type"] = self.entity_type
        if self.entity_id:
            result["entity_id"] = self.entity_id
        return result


class ConcurrencyError(DomainException):
    """
    Conflito no armazenamento.

    Lançada pelo repositório quando uma escrita viola uma restrição
    (ex: unicidade de CPF/email) ou quando o registro foi alterado
    por outro processo entre a validação e a gravação.
    """

    def __init__(self, message: str):
        super().__init__(message, "CONCURRENCY_ERROR")
