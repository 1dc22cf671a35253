"""
API Views JSON para o domínio de Pessoas.

Endpoints:
- GET    /pessoas/api/       - Listar pessoas (ordem de nome)
- POST   /pessoas/api/       - Criar pessoa
- GET    /pessoas/api/<id>/  - Obter pessoa
- PUT    /pessoas/api/<id>/  - Atualizar pessoa (payload inclui "id")
- DELETE /pessoas/api/<id>/  - Remover pessoa

Formato:
- Entrada: JSON
- Saída: JSON {success, data | error, errors, meta}

Status:
- 400 validação (todos os motivos em "errors"), "ID não confere", JSON malformado
- 404 pessoa não encontrada
- 409 conflito no armazenamento
"""

import json
import logging
from typing import Any, Dict, List

from django.views import View
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.utils.decorators import method_decorator
from django.views.decorators.csrf import csrf_exempt

from src.core.pessoas.dtos import CriarPessoaInputDTO, AtualizarPessoaInputDTO
from src.core.pessoas.use_cases import ID_NAO_CONFERE
from src.core.shared.exceptions import (
    ConcurrencyError,
    DomainException,
    EntityNotFoundError,
    ValidationError,
)
from src.config.container import get_container

from .forms import PessoaForm

logger = logging.getLogger(__name__)


# =============================================================================
# Helpers
# =============================================================================

def json_response(success: bool, data: Any = None, error: str = None,
                  errors: List[str] = None, status: int = 200,
                  meta: Dict = None) -> JsonResponse:
    """
    Cria resposta JSON padronizada.

    Args:
        success: Se operação foi bem sucedida
        data: Dados da resposta
        error: Mensagem de erro principal
        errors: Lista completa de motivos de rejeição
        status: HTTP status code
        meta: Metadados adicionais
    """
    response = {'success': success}

    if data is not None:
        response['data'] = data

    if error is not None:
        response['error'] = error

    if errors is not None:
        response['errors'] = errors

    if meta is not None:
        response['meta'] = meta

    return JsonResponse(response, status=status)


def parse_json_body(request: HttpRequest) -> Dict:
    """
    Parseia body JSON do request.

    Raises:
        ValueError: Se JSON inválido ou não for um objeto
    """
    if not request.body:
        return {}

    try:
        body = json.loads(request.body)
    except json.JSONDecodeError as e:
        raise ValueError(f"JSON inválido: {e}")

    if not isinstance(body, dict):
        raise ValueError("JSON inválido: esperado um objeto")
    return body


def validar_formulario(body: Dict) -> Dict:
    """
    Valida estrutura do payload com PessoaForm.

    Returns:
        cleaned_data do form

    Raises:
        ValidationError: Com todas as mensagens de campo
    """
    form = PessoaForm(data=body)
    if not form.is_valid():
        erros = form.error_list()
        raise ValidationError(erros[0], errors=erros)
    return form.cleaned_data


# =============================================================================
# Base API View
# =============================================================================

@method_decorator(csrf_exempt, name='dispatch')
class BaseAPIView(View):
    """
    View base para APIs JSON.

    Fornece parsing de JSON, acesso aos services do container
    e tradução de exceções de domínio em status HTTP.
    """

    def get_service(self, service_name: str):
        return getattr(get_container(), service_name)()

    def parse_body(self, request: HttpRequest) -> Dict:
        return parse_json_body(request)

    def dispatch(self, request, *args, **kwargs):
        try:
            return super().dispatch(request, *args, **kwargs)
        except Exception as e:
            return self.handle_exception(e)

    def handle_exception(self, e: Exception) -> JsonResponse:
        if isinstance(e, ValidationError):
            return json_response(
                success=False,
                error=e.message,
                errors=e.errors,
                status=400,
                meta={'code': e.code, 'field': e.field},
            )

        if isinstance(e, EntityNotFoundError):
            return json_response(success=False, error=e.message, status=404)

        if isinstance(e, ConcurrencyError):
            logger.warning(f"Conflito de gravação: {e}")
            return json_response(success=False, error=e.message, status=409)

        if isinstance(e, DomainException):
            return json_response(success=False, error=e.message, status=400)

        if isinstance(e, ValueError):
            return json_response(success=False, error=str(e), status=400)

        logger.exception(f"Erro inesperado na API: {e}")
        return json_response(
            success=False,
            error="Erro interno do servidor",
            status=500
        )


# =============================================================================
# Pessoa API Views
# =============================================================================

class PessoaAPIListView(BaseAPIView):
    """
    GET  /pessoas/api/ - Lista pessoas em ordem de nome
    POST /pessoas/api/ - Cria pessoa
    """

    def get(self, request: HttpRequest) -> JsonResponse:
        pessoas = self.get_service('listar_pessoas_service').execute()
        return json_response(
            success=True,
            data=[p.to_dict() for p in pessoas],
            meta={'total': len(pessoas)},
        )

    def post(self, request: HttpRequest) -> JsonResponse:
        dados = validar_formulario(self.parse_body(request))

        pessoa = self.get_service('criar_pessoa_service').execute(
            CriarPessoaInputDTO(
                nome=dados['nome'],
                email=dados['email'],
                cpf=dados['cpf'],
                data_nascimento=dados['data_nascimento'],
            )
        )

        return json_response(success=True, data=pessoa.to_dict(), status=201)


class PessoaAPIDetailView(BaseAPIView):
    """
    GET    /pessoas/api/<id>/ - Obter pessoa
    PUT    /pessoas/api/<id>/ - Atualizar pessoa
    DELETE /pessoas/api/<id>/ - Remover pessoa
    """

    def get(self, request: HttpRequest, pk: int) -> JsonResponse:
        pessoa = self.get_service('obter_pessoa_service').execute(pk)
        return json_response(success=True, data=pessoa.to_dict())

    def put(self, request: HttpRequest, pk: int) -> JsonResponse:
        body = self.parse_body(request)
        payload_id = body.get('id')
        # Só inteiros JSON: "1", 1.5 e true não conferem com o ID da URL
        if isinstance(payload_id, bool) or not isinstance(payload_id, int):
            payload_id = None

        if payload_id != pk:
            raise ValidationError(ID_NAO_CONFERE, field='id')

        dados = validar_formulario(body)

        pessoa = self.get_service('atualizar_pessoa_service').execute(
            pk,
            AtualizarPessoaInputDTO(
                id=payload_id,
                nome=dados['nome'],
                email=dados['email'],
                cpf=dados['cpf'],
                data_nascimento=dados['data_nascimento'],
            ),
        )

        return json_response(success=True, data=pessoa.to_dict())

    def delete(self, request: HttpRequest, pk: int) -> HttpResponse:
        self.get_service('remover_pessoa_service').execute(pk)
        return HttpResponse(status=204)
