"""
Django Forms para validação de entrada de Pessoas.

Forms são DRIVING ADAPTERS: validam a estrutura dos campos
(obrigatoriedade, tamanho, tipo) e convertem texto em tipos
Python antes de montar os DTOs. CPF, idade e unicidade são
regras do Core (ValidadorPessoa) e não são checadas aqui.

Usado tanto pelas views HTML quanto pela API JSON.
"""

from typing import List

from django import forms

from src.core.pessoas.validators import CPF_TAMANHO, normalizar_cpf


class PessoaForm(forms.Form):
    """Form de criação/edição de pessoa."""

    nome = forms.CharField(
        label='Nome',
        max_length=100,
        widget=forms.TextInput(attrs={
            'class': 'form-control',
            'placeholder': 'Nome completo',
        }),
        error_messages={
            'required': 'Nome é obrigatório',
            'max_length': 'Nome deve ter no máximo 100 caracteres',
        },
    )

    email = forms.EmailField(
        label='Email',
        max_length=255,
        widget=forms.EmailInput(attrs={
            'class': 'form-control',
            'placeholder': 'email@exemplo.com',
        }),
        error_messages={
            'required': 'Email é obrigatório',
            'invalid': 'Email inválido',
            'max_length': 'Email deve ter no máximo 255 caracteres',
        },
    )

    cpf = forms.CharField(
        label='CPF',
        max_length=14,
        widget=forms.TextInput(attrs={
            'class': 'form-control',
            'placeholder': '000.000.000-00',
        }),
        error_messages={
            'required': 'CPF é obrigatório',
            'max_length': 'CPF deve ter 11 dígitos',
        },
    )

    data_nascimento = forms.DateField(
        label='Data de nascimento',
        input_formats=['%Y-%m-%d', '%d/%m/%Y'],
        widget=forms.DateInput(
            attrs={'class': 'form-control', 'type': 'date'},
            format='%Y-%m-%d',
        ),
        error_messages={
            'required': 'Data de nascimento é obrigatória',
            'invalid': 'Data de nascimento inválida',
        },
    )

    def clean_nome(self):
        return self.cleaned_data['nome'].strip()

    def clean_cpf(self):
        """Remove pontuação; exige 11 caracteres."""
        cpf = normalizar_cpf(self.cleaned_data['cpf'])
        if len(cpf) != CPF_TAMANHO:
            raise forms.ValidationError(f'CPF deve ter {CPF_TAMANHO} dígitos')
        return cpf

    def error_list(self) -> List[str]:
        """Mensagens de erro em ordem de campo, achatadas."""
        return [
            str(mensagem)
            for campo in self.errors
            for mensagem in self.errors[campo]
        ]
