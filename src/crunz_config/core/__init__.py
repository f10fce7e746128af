# src/crunz_config/core/__init__.py
"""
Core do crunz-config.

Componentes principais:
    - config → localização, leitura, validação e resolução de configuração
    - logger → logger de console com níveis de verbosidade

Princípios fundamentais:
    - Nenhuma decisão silenciosa: todo comportamento é explícito e testado
    - Colaboradores são injetados, nunca consultados globalmente
"""
