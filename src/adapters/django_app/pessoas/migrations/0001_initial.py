"""
Migration inicial para o domínio de Pessoas.

Cria a tabela ``pessoas`` com índices únicos em cpf e email.
"""

from django.db import migrations, models
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='PessoaModel',
            fields=[
                ('id', models.BigAutoField(
                    primary_key=True,
                    serialize=False
                )),
                ('nome', models.CharField(
                    max_length=100,
                    db_index=True,
                    help_text='Nome completo'
                )),
                ('email', models.EmailField(
                    max_length=255,
                    unique=True,
                    help_text='Email da pessoa'
                )),
                ('cpf', models.CharField(
                    max_length=11,
                    unique=True,
                    help_text='CPF com 11 dígitos, sem pontuação'
                )),
                ('data_nascimento', models.DateField(
                    help_text='Data de nascimento'
                )),
                ('data_criacao', models.DateTimeField(
                    default=django.utils.timezone.now,
                    editable=False,
                    help_text='Data/hora de criação'
                )),
                ('data_atualizacao', models.DateTimeField(
                    null=True,
                    blank=True,
                    help_text='Data/hora da última atualização'
                )),
            ],
            options={
                'verbose_name': 'Pessoa',
                'verbose_name_plural': 'Pessoas',
                'db_table': 'pessoas',
                'ordering': ['nome'],
            },
        ),
    ]
