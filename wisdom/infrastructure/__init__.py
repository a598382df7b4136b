"""
Infraestrutura: configuração e logging estruturado.
"""
