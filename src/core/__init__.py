"""
Core do Cadastro de Pessoas.

Regras do domínio (formato dos campos, CPF, maioridade,
unicidade) e os use cases que as aplicam. Nada aqui importa
Django: a persistência entra pelos ports de cada domínio.
"""
