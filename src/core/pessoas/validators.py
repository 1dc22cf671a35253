"""
Validações do Domínio de Pessoas.

Três regras protegem toda escrita de uma Pessoa:

- CPF com dígitos verificadores corretos (``validar_cpf``)
- Titular maior de idade na data da escrita (``e_maior_de_idade``)
- CPF e email únicos entre os registros (``VerificadorUnicidade``)

``ValidadorPessoa`` compõe as três em ordem fixa e devolve a lista
de motivos de rejeição; lista vazia significa candidato aceito.

As funções de validação nunca lançam exceção para entrada
malformada: devolvem False.
"""

from datetime import date, datetime
from typing import Callable, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .entities import PessoaEntity
    from .ports import PessoaRepository


ERRO_CPF_INVALIDO = "CPF inválido"
ERRO_CPF_DUPLICADO = "CPF já cadastrado"
ERRO_EMAIL_DUPLICADO = "Email já cadastrado"
ERRO_MENOR_DE_IDADE = "Pessoa deve ser maior de idade"

IDADE_MINIMA = 18

CPF_TAMANHO = 11
_PESOS_DIGITO_1 = range(10, 1, -1)
_PESOS_DIGITO_2 = range(11, 1, -1)


# =============================================================================
# CPF
# =============================================================================

def normalizar_cpf(cpf) -> str:
    """Remove a pontuação ('.' e '-') de um CPF."""
    if not isinstance(cpf, str):
        return ""
    return cpf.replace(".", "").replace("-", "")


def _digito_verificador(digitos: str, pesos) -> int:
    resto = sum(int(d) * p for d, p in zip(digitos, pesos)) % 11
    return 0 if resto < 2 else 11 - resto


def validar_cpf(cpf) -> bool:
    """
    Verifica os dígitos verificadores de um CPF.

    Aceita CPF com ou sem pontuação ("529.982.247-25" ou "52998224725").

    Algoritmo:
        1. Remove '.' e '-'
        2. Exige exatamente 11 dígitos decimais
        3. Rejeita sequências repetidas ("11111111111")
        4. Dígito 1: posições 0-8 com pesos 10..2, resto da divisão por 11
           (resto < 2 vira 0, senão 11 - resto)
        5. Dígito 2: posições 0-9 com pesos 11..2, mesma regra

    Args:
        cpf: Texto do CPF

    Returns:
        True se os dois dígitos verificadores conferem
    """
    numeros = normalizar_cpf(cpf)

    if len(numeros) != CPF_TAMANHO:
        return False
    if not all(c in "0123456789" for c in numeros):
        return False
    if len(set(numeros)) == 1:
        return False

    digito_1 = _digito_verificador(numeros[:9], _PESOS_DIGITO_1)
    digito_2 = _digito_verificador(numeros[:10], _PESOS_DIGITO_2)

    return int(numeros[9]) == digito_1 and int(numeros[10]) == digito_2


def formatar_cpf(cpf) -> str:
    """Formata CPF como 000.000.000-00 (devolve a entrada se não tiver 11 dígitos)."""
    numeros = normalizar_cpf(cpf)
    if len(numeros) != CPF_TAMANHO or not numeros.isdigit():
        return cpf or ""
    return f"{numeros[:3]}.{numeros[3:6]}.{numeros[6:9]}-{numeros[9:]}"


# =============================================================================
# IDADE
# =============================================================================

def _como_data(valor) -> date:
    if isinstance(valor, datetime):
        return valor.date()
    return valor


def calcular_idade(data_nascimento: date, hoje: date) -> int:
    """
    Idade em anos completos na data ``hoje``.

    Desconta um ano se o aniversário ainda não ocorreu no ano corrente.
    A comparação é por (mês, dia), então nascidos em ano bissexto
    não têm a fronteira deslocada.
    """
    nascimento = _como_data(data_nascimento)
    hoje = _como_data(hoje)

    idade = hoje.year - nascimento.year
    if (hoje.month, hoje.day) < (nascimento.month, nascimento.day):
        idade -= 1
    return idade


def e_maior_de_idade(
    data_nascimento: date,
    hoje: date,
    idade_minima: int = IDADE_MINIMA,
) -> bool:
    """
    True se a pessoa tem pelo menos ``idade_minima`` anos em ``hoje``.

    Fronteira inclusiva: exatamente 18 anos e 0 dias é maior de idade.
    A data de referência é sempre injetada.
    """
    if data_nascimento is None or hoje is None:
        return False
    return calcular_idade(data_nascimento, hoje) >= idade_minima


# =============================================================================
# UNICIDADE
# =============================================================================

class VerificadorUnicidade:
    """
    Verifica se um valor de campo está livre no repositório.

    Example:
        verificador = VerificadorUnicidade(repo, "cpf")
        verificador.e_unico("12345678909")                 # criação
        verificador.e_unico("12345678909", excluir_id=7)   # atualização do id 7
    """

    def __init__(self, repo: "PessoaRepository", campo: str):
        self.repo = repo
        self.campo = campo

    def e_unico(self, valor: str, excluir_id: Optional[int] = None) -> bool:
        existentes = self.repo.find_by(self.campo, valor)
        return not any(p.id != excluir_id for p in existentes)


# =============================================================================
# PIPELINE
# =============================================================================

class ValidadorPessoa:
    """
    Pipeline de validação de uma Pessoa candidata a escrita.

    Todas as verificações rodam; os motivos são acumulados nesta ordem:

    1. "CPF inválido" se o checksum falhar; senão "CPF já cadastrado"
       se outro registro usar o CPF
    2. "Email já cadastrado"
    3. "Pessoa deve ser maior de idade"

    Attributes:
        repo: Repositório consultado para unicidade
        relogio: Callable que devolve o "agora" de referência
        idade_minima: Idade mínima exigida (default 18)
    """

    def __init__(
        self,
        repo: "PessoaRepository",
        relogio: Callable[[], datetime] = datetime.now,
        idade_minima: int = IDADE_MINIMA,
    ):
        self.repo = repo
        self.relogio = relogio
        self.idade_minima = idade_minima
        self.unicidade_cpf = VerificadorUnicidade(repo, "cpf")
        self.unicidade_email = VerificadorUnicidade(repo, "email")

    def validar(
        self,
        candidato: "PessoaEntity",
        excluir_id: Optional[int] = None,
    ) -> List[str]:
        erros: List[str] = []

        if not validar_cpf(candidato.cpf):
            erros.append(ERRO_CPF_INVALIDO)
        elif not self.unicidade_cpf.e_unico(
            normalizar_cpf(candidato.cpf), excluir_id
        ):
            erros.append(ERRO_CPF_DUPLICADO)

        if not self.unicidade_email.e_unico(candidato.email, excluir_id):
            erros.append(ERRO_EMAIL_DUPLICADO)

        if not e_maior_de_idade(
            candidato.data_nascimento, self.relogio(), self.idade_minima
        ):
            erros.append(ERRO_MENOR_DE_IDADE)

        return erros
