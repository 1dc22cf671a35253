"""
Dependency Injection Container.

Configura e gerencia as dependências da aplicação com
dependency-injector.

Padrões:
- Singleton: uma instância para toda app (repositório, publisher)
- Factory: nova instância por chamada (services, UoW, validador)
- Selector: escolhe o publisher pelo modo configurado
"""

from typing import Optional

from dependency_injector import containers, providers
from django.utils import timezone


def _import(module: str, name: str):
    return getattr(__import__(module, fromlist=[name]), name)


class Container(containers.DeclarativeContainer):
    """
    Container principal de Dependency Injection.

    Organização:
    - Configuration: event_publisher_mode, idade_minima
    - Infrastructure: relógio, publisher de eventos
    - Repositories: persistência
    - Unit of Work: transações
    - Services: use cases

    Example:
        container = get_container()
        service = container.criar_pessoa_service()
        result = service.execute(input_dto)
    """

    # =========================================================================
    # Configuration
    # =========================================================================

    config = providers.Configuration()

    # =========================================================================
    # Infrastructure
    # =========================================================================

    relogio = providers.Object(timezone.localtime)

    event_publisher = providers.Selector(
        config.event_publisher_mode,
        sync=providers.Singleton(
            lambda: _import(
                'src.adapters.django_app.events.publishers',
                'LoggingEventPublisher',
            )()
        ),
        celery=providers.Singleton(
            lambda: _import(
                'src.adapters.django_app.events.publishers',
                'CeleryEventPublisher',
            )()
        ),
    )

    # =========================================================================
    # Repositories
    # =========================================================================

    pessoa_repository = providers.Singleton(
        lambda: _import(
            'src.adapters.django_app.pessoas.repositories',
            'DjangoPessoaRepository',
        )()
    )

    # =========================================================================
    # Unit of Work (nova instância por operação)
    # =========================================================================

    unit_of_work = providers.Factory(
        lambda event_publisher: _import(
            'src.adapters.django_app.shared.unit_of_work',
            'DjangoUnitOfWork',
        )(event_publisher=event_publisher),
        event_publisher=event_publisher,
    )

    # =========================================================================
    # Validação
    # =========================================================================

    validador_pessoa = providers.Factory(
        lambda repo, relogio, idade_minima: _import(
            'src.core.pessoas.validators', 'ValidadorPessoa'
        )(repo, relogio=relogio, idade_minima=idade_minima),
        repo=pessoa_repository,
        relogio=relogio,
        idade_minima=config.idade_minima,
    )

    # =========================================================================
    # Services / Use Cases
    # =========================================================================

    listar_pessoas_service = providers.Factory(
        lambda pessoa_repo: _import(
            'src.core.pessoas.use_cases', 'ListarPessoasService'
        )(pessoa_repo=pessoa_repo),
        pessoa_repo=pessoa_repository,
    )

    obter_pessoa_service = providers.Factory(
        lambda pessoa_repo: _import(
            'src.core.pessoas.use_cases', 'ObterPessoaService'
        )(pessoa_repo=pessoa_repo),
        pessoa_repo=pessoa_repository,
    )

    criar_pessoa_service = providers.Factory(
        lambda pessoa_repo, uow, validador, relogio: _import(
            'src.core.pessoas.use_cases', 'CriarPessoaService'
        )(pessoa_repo=pessoa_repo, uow=uow, validador=validador, relogio=relogio),
        pessoa_repo=pessoa_repository,
        uow=unit_of_work,
        validador=validador_pessoa,
        relogio=relogio,
    )

    atualizar_pessoa_service = providers.Factory(
        lambda pessoa_repo, uow, validador, relogio: _import(
            'src.core.pessoas.use_cases', 'AtualizarPessoaService'
        )(pessoa_repo=pessoa_repo, uow=uow, validador=validador, relogio=relogio),
        pessoa_repo=pessoa_repository,
        uow=unit_of_work,
        validador=validador_pessoa,
        relogio=relogio,
    )

    remover_pessoa_service = providers.Factory(
        lambda pessoa_repo, uow: _import(
            'src.core.pessoas.use_cases', 'RemoverPessoaService'
        )(pessoa_repo=pessoa_repo, uow=uow),
        pessoa_repo=pessoa_repository,
        uow=unit_of_work,
    )


# =============================================================================
# Container Global (Singleton)
# =============================================================================

_container: Optional[Container] = None


def _settings_config() -> dict:
    from django.conf import settings

    return {
        'event_publisher_mode': getattr(settings, 'EVENT_PUBLISHER_MODE', 'sync'),
        'idade_minima': int(getattr(settings, 'PESSOA_IDADE_MINIMA', 18)),
    }


def get_container() -> Container:
    """
    Retorna instância global do container.

    Criada na primeira chamada, com configuração lida dos
    settings Django.
    """
    global _container

    if _container is None:
        _container = Container()
        _container.config.from_dict(_settings_config())

    return _container


def reset_container() -> None:
    """Reset do container (para testes)."""
    global _container
    _container = None


# =============================================================================
# Testing Container
# =============================================================================

class TestingContainer(containers.DeclarativeContainer):
    """
    Container para testes sem banco.

    Repositório e UnitOfWork em memória; publisher em memória
    para inspecionar eventos.

    Example:
        container = TestingContainer()
        container.criar_pessoa_service().execute(dto)
        container.event_publisher().published_events
    """

    relogio = providers.Object(timezone.localtime)

    event_publisher = providers.Singleton(
        lambda: _import(
            'src.adapters.django_app.events.publishers', 'InMemoryEventPublisher'
        )()
    )

    pessoa_repository = providers.Singleton(
        lambda: _import('src.core.pessoas.ports', 'InMemoryPessoaRepository')()
    )

    unit_of_work = providers.Factory(
        lambda event_publisher: _import(
            'src.adapters.django_app.shared.unit_of_work', 'InMemoryUnitOfWork'
        )(event_publisher=event_publisher),
        event_publisher=event_publisher,
    )

    validador_pessoa = providers.Factory(
        lambda repo, relogio: _import(
            'src.core.pessoas.validators', 'ValidadorPessoa'
        )(repo, relogio=relogio),
        repo=pessoa_repository,
        relogio=relogio,
    )

    listar_pessoas_service = providers.Factory(
        lambda pessoa_repo: _import(
            'src.core.pessoas.use_cases', 'ListarPessoasService'
        )(pessoa_repo=pessoa_repo),
        pessoa_repo=pessoa_repository,
    )

    criar_pessoa_service = providers.Factory(
        lambda pessoa_repo, uow, validador, relogio: _import(
            'src.core.pessoas.use_cases', 'CriarPessoaService'
        )(pessoa_repo=pessoa_repo, uow=uow, validador=validador, relogio=relogio),
        pessoa_repo=pessoa_repository,
        uow=unit_of_work,
        validador=validador_pessoa,
        relogio=relogio,
    )
