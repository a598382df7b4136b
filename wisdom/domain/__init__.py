"""
Domínio: regras de validação das colunas de origem.
"""
