"""
Views Django (HTML) para o domínio de Pessoas.

DRIVING ADAPTERS: recebem a requisição, validam o form,
invocam o use case via container e renderizam o template.

Telas:
- Lista em tabela ordenada por nome, com botão que abre o
  formulário de cadastro em um <dialog>
- Formulário de criação/edição mostrando todos os motivos de rejeição
- Confirmação de remoção
"""

import logging

from django.views import View
from django.http import HttpResponse, HttpRequest
from django.shortcuts import render, redirect
from django.contrib import messages

from src.core.pessoas.dtos import CriarPessoaInputDTO, AtualizarPessoaInputDTO
from src.core.shared.exceptions import (
    ConcurrencyError,
    EntityNotFoundError,
    ValidationError,
)
from src.config.container import get_container

from .forms import PessoaForm

logger = logging.getLogger(__name__)


# =============================================================================
# Mixins
# =============================================================================

class ContainerMixin:
    """Acesso aos services do container de DI."""

    def get_service(self, service_name: str):
        return getattr(get_container(), service_name)()


class FlashMessageMixin:
    """Flash messages de forma consistente."""

    def success_message(self, request: HttpRequest, message: str) -> None:
        messages.success(request, message)

    def error_message(self, request: HttpRequest, message: str) -> None:
        messages.error(request, message)


def _adicionar_erros(form: PessoaForm, erro: ValidationError) -> None:
    """Copia todos os motivos do ValidationError para os erros gerais do form."""
    for mensagem in erro.errors:
        form.add_error(None, mensagem)


# =============================================================================
# Views HTML
# =============================================================================

class PessoaListView(ContainerMixin, FlashMessageMixin, View):
    """
    Lista pessoas em tabela.

    GET /pessoas/
    """

    template_name = 'pessoas/list.html'

    def get(self, request: HttpRequest) -> HttpResponse:
        try:
            pessoas = self.get_service('listar_pessoas_service').execute()
        except Exception as e:
            logger.exception(f"Erro ao listar pessoas: {e}")
            pessoas = []
            self.error_message(request, "Erro ao carregar pessoas.")

        context = {
            'pessoas': pessoas,
            'total_pessoas': len(pessoas),
            'form': PessoaForm(),
        }
        return render(request, self.template_name, context)


class PessoaCreateView(ContainerMixin, FlashMessageMixin, View):
    """
    Cadastra pessoa.

    GET  /pessoas/criar/ - Formulário
    POST /pessoas/criar/ - Processa cadastro
    """

    template_name = 'pessoas/form.html'

    def get(self, request: HttpRequest) -> HttpResponse:
        return render(request, self.template_name, {'form': PessoaForm(), 'pessoa': None})

    def post(self, request: HttpRequest) -> HttpResponse:
        form = PessoaForm(request.POST)

        if not form.is_valid():
            return render(request, self.template_name, {'form': form, 'pessoa': None}, status=400)

        try:
            output = self.get_service('criar_pessoa_service').execute(
                CriarPessoaInputDTO(**form.cleaned_data)
            )
        except ValidationError as e:
            logger.warning(f"Validação falhou ao cadastrar pessoa: {e.errors}")
            _adicionar_erros(form, e)
            return render(request, self.template_name, {'form': form, 'pessoa': None}, status=400)
        except ConcurrencyError as e:
            form.add_error(None, e.message)
            return render(request, self.template_name, {'form': form, 'pessoa': None}, status=409)

        self.success_message(request, f"{output.nome} cadastrada com sucesso!")
        return redirect('pessoas:list')


class PessoaUpdateView(ContainerMixin, FlashMessageMixin, View):
    """
    Edita pessoa.

    GET  /pessoas/<id>/editar/
    POST /pessoas/<id>/editar/
    """

    template_name = 'pessoas/form.html'

    def get(self, request: HttpRequest, pk: int) -> HttpResponse:
        try:
            pessoa = self.get_service('obter_pessoa_service').execute(pk)
        except EntityNotFoundError as e:
            self.error_message(request, e.message)
            return redirect('pessoas:list')

        form = PessoaForm(initial={
            'nome': pessoa.nome,
            'email': pessoa.email,
            'cpf': pessoa.cpf_formatado,
            'data_nascimento': pessoa.data_nascimento,
        })
        return render(request, self.template_name, {'form': form, 'pessoa': pessoa})

    def post(self, request: HttpRequest, pk: int) -> HttpResponse:
        form = PessoaForm(request.POST)
        context = {'form': form, 'pessoa': {'id': pk}}

        if not form.is_valid():
            return render(request, self.template_name, context, status=400)

        try:
            output = self.get_service('atualizar_pessoa_service').execute(
                pk, AtualizarPessoaInputDTO(id=pk, **form.cleaned_data)
            )
        except ValidationError as e:
            logger.warning(f"Validação falhou ao atualizar pessoa {pk}: {e.errors}")
            _adicionar_erros(form, e)
            return render(request, self.template_name, context, status=400)
        except EntityNotFoundError as e:
            self.error_message(request, e.message)
            return redirect('pessoas:list')
        except ConcurrencyError as e:
            form.add_error(None, e.message)
            return render(request, self.template_name, context, status=409)

        self.success_message(request, f"{output.nome} atualizada com sucesso!")
        return redirect('pessoas:list')


class PessoaDeleteView(ContainerMixin, FlashMessageMixin, View):
    """
    Remove pessoa.

    GET  /pessoas/<id>/remover/ - Confirmação
    POST /pessoas/<id>/remover/ - Remove
    """

    template_name = 'pessoas/confirm_delete.html'

    def get(self, request: HttpRequest, pk: int) -> HttpResponse:
        try:
            pessoa = self.get_service('obter_pessoa_service').execute(pk)
        except EntityNotFoundError as e:
            self.error_message(request, e.message)
            return redirect('pessoas:list')
        return render(request, self.template_name, {'pessoa': pessoa})

    def post(self, request: HttpRequest, pk: int) -> HttpResponse:
        try:
            self.get_service('remover_pessoa_service').execute(pk)
        except EntityNotFoundError as e:
            self.error_message(request, e.message)
            return redirect('pessoas:list')

        self.success_message(request, "Pessoa removida.")
        return redirect('pessoas:list')
