"""
Django Models para o domínio de Pessoas.

Models são ADAPTERS: persistem os dados de PessoaEntity
(src/core/pessoas/entities.py) e não contêm regra de negócio.
Conversão Entity <-> Model fica em mappers.py.

As restrições ``unique`` de cpf e email garantem a unicidade
mesmo quando duas escritas concorrentes passam juntas pela
validação prévia.
"""

from django.db import models
from django.utils import timezone

from src.core.pessoas.validators import formatar_cpf


class PessoaModel(models.Model):
    """
    Model Django para persistência de Pessoas.

    Fields:
        id: Chave primária auto incremento
        nome: Nome completo
        email: Email (único)
        cpf: CPF com 11 dígitos, sem pontuação (único)
        data_nascimento: Data de nascimento
        data_criacao: Timestamp de criação
        data_atualizacao: Timestamp da última atualização
    """

    id = models.BigAutoField(primary_key=True)

    nome = models.CharField(
        max_length=100,
        db_index=True,
        help_text="Nome completo"
    )

    email = models.EmailField(
        max_length=255,
        unique=True,
        help_text="Email da pessoa"
    )

    cpf = models.CharField(
        max_length=11,
        unique=True,
        help_text="CPF com 11 dígitos, sem pontuação"
    )

    data_nascimento = models.DateField(
        help_text="Data de nascimento"
    )

    data_criacao = models.DateTimeField(
        default=timezone.now,
        editable=False,
        help_text="Data/hora de criação"
    )

    data_atualizacao = models.DateTimeField(
        null=True,
        blank=True,
        help_text="Data/hora da última atualização"
    )

    class Meta:
        db_table = 'pessoas'
        verbose_name = 'Pessoa'
        verbose_name_plural = 'Pessoas'
        ordering = ['nome']

    def __str__(self):
        return f"{self.nome} ({self.cpf_formatado})"

    @property
    def cpf_formatado(self) -> str:
        return formatar_cpf(self.cpf)
