"""
Django Admin para o domínio de Pessoas.

O admin é mais uma porta de escrita: o form passa pelo mesmo
ValidadorPessoa dos use cases (CPF, unicidade, idade) e a
edição registra data_atualizacao.
"""

from django import forms
from django.contrib import admin
from django.utils import timezone

from src.config.container import get_container
from src.core.pessoas.entities import PessoaEntity
from src.core.pessoas.validators import CPF_TAMANHO, normalizar_cpf

from .models import PessoaModel


class PessoaAdminForm(forms.ModelForm):
    """Form do admin com as regras do cadastro."""

    cpf = forms.CharField(label='CPF', max_length=14)

    class Meta:
        model = PessoaModel
        fields = ['nome', 'email', 'cpf', 'data_nascimento']

    def clean_cpf(self):
        cpf = normalizar_cpf(self.cleaned_data['cpf'])
        if len(cpf) != CPF_TAMANHO:
            raise forms.ValidationError(f'CPF deve ter {CPF_TAMANHO} dígitos')
        return cpf

    def clean(self):
        cleaned_data = super().clean()
        campos = ('nome', 'email', 'cpf', 'data_nascimento')
        if any(cleaned_data.get(campo) is None for campo in campos):
            return cleaned_data

        candidato = PessoaEntity(
            id=self.instance.pk,
            nome=cleaned_data['nome'],
            email=cleaned_data['email'],
            cpf=cleaned_data['cpf'],
            data_nascimento=cleaned_data['data_nascimento'],
        )
        validador = get_container().validador_pessoa()
        for motivo in validador.validar(candidato, excluir_id=self.instance.pk):
            self.add_error(None, motivo)
        return cleaned_data

    def validate_unique(self):
        # Unicidade de cpf/email já reportada pelo ValidadorPessoa em clean()
        pass


@admin.register(PessoaModel)
class PessoaAdmin(admin.ModelAdmin):
    """Admin para PessoaModel."""

    form = PessoaAdminForm

    list_display = [
        'id',
        'nome',
        'email',
        'cpf_formatado',
        'data_nascimento',
        'data_criacao',
        'data_atualizacao',
    ]

    search_fields = [
        'nome',
        'email',
        'cpf',
    ]

    readonly_fields = [
        'id',
        'data_criacao',
        'data_atualizacao',
    ]

    fieldsets = [
        ('Identificação', {
            'fields': ['id', 'nome', 'email', 'cpf', 'data_nascimento'],
        }),
        ('Timestamps', {
            'fields': ['data_criacao', 'data_atualizacao'],
            'classes': ['collapse'],
        }),
    ]

    ordering = ['nome']

    def cpf_formatado(self, obj):
        return obj.cpf_formatado
    cpf_formatado.short_description = 'CPF'

    def save_model(self, request, obj, form, change):
        if change:
            obj.data_atualizacao = timezone.now()
        super().save_model(request, obj, form, change)
