"""
Mappers para conversão entre PessoaEntity (Core) e PessoaModel (Django).

Mappers são stateless e não contêm regra de negócio.
"""

from typing import Iterable, List

from src.core.pessoas.entities import PessoaEntity

from .models import PessoaModel


class PessoaMapper:
    """
    Mapper Entity <-> Model.

    - to_model(): Entity → Model (não chama .save())
    - to_entity(): Model → Entity (sem revalidar: dados já validados na escrita)
    - to_fields(): campos graváveis para ``update()``
    """

    @staticmethod
    def to_model(entity: PessoaEntity) -> PessoaModel:
        model = PessoaModel(
            id=entity.id,
            nome=entity.nome,
            email=entity.email,
            cpf=entity.cpf,
            data_nascimento=entity.data_nascimento,
            data_atualizacao=entity.data_atualizacao,
        )
        if entity.data_criacao is not None:
            model.data_criacao = entity.data_criacao
        return model

    @staticmethod
    def to_entity(model: PessoaModel) -> PessoaEntity:
        return PessoaEntity(
            id=model.id,
            nome=model.nome,
            email=model.email,
            cpf=model.cpf,
            data_nascimento=model.data_nascimento,
            data_criacao=model.data_criacao,
            data_atualizacao=model.data_atualizacao,
        )

    @staticmethod
    def to_entity_list(models: Iterable[PessoaModel]) -> List[PessoaEntity]:
        return [PessoaMapper.to_entity(m) for m in models]

    @staticmethod
    def to_fields(entity: PessoaEntity) -> dict:
        """Campos sobrescritos numa atualização; data_criacao fica de fora."""
        return {
            'nome': entity.nome,
            'email': entity.email,
            'cpf': entity.cpf,
            'data_nascimento': entity.data_nascimento,
            'data_atualizacao': entity.data_atualizacao,
        }
