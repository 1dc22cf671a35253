#!/usr/bin/env python
"""
Setup rápido para desenvolvimento local.

Este script:
1. Configura Django settings
2. Executa migrations
3. Cadastra pessoas de exemplo (opcional), passando pelas mesmas
   validações da API

Uso:
    python scripts/quick_setup.py
    python scripts/quick_setup.py --with-sample-data
"""

import os
import sys
import argparse
from datetime import date

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


SAMPLE_PESSOAS = [
    {
        'nome': 'Ana Souza',
        'email': 'ana.souza@example.com',
        'cpf': '529.982.247-25',
        'data_nascimento': date(1990, 5, 17),
    },
    {
        'nome': 'Bruno Lima',
        'email': 'bruno.lima@example.com',
        'cpf': '111.444.777-35',
        'data_nascimento': date(1985, 11, 2),
    },
    {
        'nome': 'Carla Mendes',
        'email': 'carla.mendes@example.com',
        'cpf': '987.654.321-00',
        'data_nascimento': date(2000, 1, 30),
    },
]


def setup_django():
    """Configura Django para uso standalone (SQLite se nada for definido)."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'src.config.settings')

    import django
    django.setup()


def run_migrations():
    from django.core.management import call_command

    print("📦 Executando migrations...")
    call_command('migrate', verbosity=1)
    print("✅ Migrations concluídas!")


def create_sample_data():
    """Cadastra pessoas de exemplo via use case; ignora as já existentes."""
    from src.config.container import get_container
    from src.core.pessoas.dtos import CriarPessoaInputDTO
    from src.core.shared.exceptions import ValidationError

    service_factory = get_container().criar_pessoa_service

    print("📝 Cadastrando pessoas de exemplo...")

    criadas = 0
    for dados in SAMPLE_PESSOAS:
        try:
            pessoa = service_factory().execute(CriarPessoaInputDTO(**dados))
        except ValidationError as e:
            print(f"   - {dados['nome']}: {', '.join(e.errors)}")
            continue
        criadas += 1
        print(f"   ✓ {pessoa.nome} ({pessoa.cpf_formatado})")

    print(f"✅ {criadas} pessoas cadastradas!")


def check_connection() -> bool:
    from django.db import connection

    print("🔍 Verificando conexão com o banco...")

    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
    except Exception as e:
        print(f"❌ Erro de conexão: {e}")
        return False

    print("✅ Conexão OK!")
    return True


def show_info():
    from django.conf import settings

    print("\n" + "=" * 60)
    print("📊 Informações do Setup")
    print("=" * 60)
    print(f"  Database Engine: {settings.DATABASES['default']['ENGINE']}")
    print(f"  Database Name: {settings.DATABASES['default']['NAME']}")
    print(f"  Debug Mode: {settings.DEBUG}")
    print("=" * 60)
    print("\n🚀 Próximos passos:")
    print("   1. python manage.py runserver")
    print("   2. Acesse: http://localhost:8000/pessoas/")
    print("   3. API:    http://localhost:8000/pessoas/api/")
    print("\n")


def main():
    parser = argparse.ArgumentParser(description='Setup rápido para desenvolvimento')
    parser.add_argument(
        '--with-sample-data',
        action='store_true',
        help='Cadastrar pessoas de exemplo'
    )
    parser.add_argument(
        '--check-only',
        action='store_true',
        help='Apenas verificar conexão'
    )

    args = parser.parse_args()

    print("\n" + "=" * 60)
    print("🔧 Cadastro de Pessoas - Quick Setup")
    print("=" * 60 + "\n")

    setup_django()

    if args.check_only:
        check_connection()
        return

    if not check_connection():
        print("\n⚠️  Certifique-se de que o banco de dados está rodando.")
        print("   Sem DATABASE_URL/DATABASE_NAME o SQLite local é usado.")
        return

    run_migrations()

    if args.with_sample_data:
        create_sample_data()

    show_info()


if __name__ == '__main__':
    main()
