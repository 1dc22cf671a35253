"""
Configurações globais do Pytest para o Cadastro de Pessoas.

Configura Django (SQLite em memória, Celery em modo eager)
antes da coleta e fornece fixtures compartilhadas.
"""

from datetime import date, datetime
from pathlib import Path

import pytest


def pytest_configure(config):
    """Configura Django e markers antes dos testes."""
    import django
    from django.conf import settings

    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )

    if not settings.configured:
        settings.configure(
            DEBUG=True,
            SECRET_KEY='test-secret-key',
            ALLOWED_HOSTS=['testserver', 'localhost'],
            DATABASES={
                'default': {
                    'ENGINE': 'django.db.backends.sqlite3',
                    'NAME': ':memory:',
                }
            },
            INSTALLED_APPS=[
                'django.contrib.admin',
                'django.contrib.auth',
                'django.contrib.contenttypes',
                'django.contrib.sessions',
                'django.contrib.messages',
                'src.adapters.django_app.pessoas',
            ],
            MIDDLEWARE=[
                'django.contrib.sessions.middleware.SessionMiddleware',
                'django.middleware.common.CommonMiddleware',
                'django.middleware.csrf.CsrfViewMiddleware',
                'django.contrib.auth.middleware.AuthenticationMiddleware',
                'django.contrib.messages.middleware.MessageMiddleware',
            ],
            ROOT_URLCONF='src.config.urls',
            TEMPLATES=[
                {
                    'BACKEND': 'django.template.backends.django.DjangoTemplates',
                    'APP_DIRS': True,
                    'OPTIONS': {
                        'context_processors': [
                            'django.template.context_processors.request',
                            'django.contrib.auth.context_processors.auth',
                            'django.contrib.messages.context_processors.messages',
                        ],
                    },
                },
            ],
            DEFAULT_AUTO_FIELD='django.db.models.BigAutoField',
            USE_TZ=True,
            TIME_ZONE='America/Sao_Paulo',
            EVENT_PUBLISHER_MODE='sync',
            PESSOA_IDADE_MINIMA=18,
            CELERY_BROKER_URL='memory://',
            CELERY_RESULT_BACKEND='cache+memory://',
            CELERY_TASK_ALWAYS_EAGER=True,
        )
        django.setup()


@pytest.fixture(scope="session")
def project_root():
    return Path(__file__).parent.parent


@pytest.fixture(autouse=True)
def reset_di_container():
    """Container global novo a cada teste."""
    from src.config.container import reset_container

    reset_container()
    yield
    reset_container()


# =============================================================================
# Fixtures de domínio
# =============================================================================

CPF_VALIDO = "12345678909"
CPF_VALIDO_2 = "98765432100"
CPF_VALIDO_3 = "52998224725"
CPF_INVALIDO = "12345678901"

HOJE = date(2024, 6, 15)


@pytest.fixture
def hoje():
    """Data de referência fixa para as regras de idade."""
    return HOJE


@pytest.fixture
def relogio():
    """Relógio fixo em 2024-06-15 12:00."""
    return lambda: datetime(2024, 6, 15, 12, 0, 0)


@pytest.fixture
def inmemory_pessoa_repo():
    from src.core.pessoas.ports import InMemoryPessoaRepository
    return InMemoryPessoaRepository()


@pytest.fixture
def inmemory_uow():
    from src.adapters.django_app.shared.unit_of_work import InMemoryUnitOfWork
    return InMemoryUnitOfWork()


@pytest.fixture
def pessoa_factory():
    """Cria PessoaEntity válida, com overrides."""
    from src.core.pessoas.entities import PessoaEntity

    def create(**kwargs):
        defaults = {
            'nome': 'Ana Souza',
            'email': 'ana@example.com',
            'cpf': CPF_VALIDO,
            'data_nascimento': date(1990, 1, 1),
        }
        defaults.update(kwargs)
        return PessoaEntity.criar(**defaults)

    return create
