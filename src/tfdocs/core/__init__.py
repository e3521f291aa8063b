# src/tfdocs/core/__init__.py
"""
Core do tfdocs.

Este pacote reúne a implementação canônica da resolução de configuração,
independente do adapter de linha de comando que popula as flags.

O core é projetado para ser:
    - determinístico
    - testável de forma isolada
    - livre de estado global (o rastreador de flags é sempre explícito)

Componentes principais:
    - config → modelo, reconciliação legado/atual, validação e projeção
    - errors → payload canônico de erro para a camada de CLI

Limites explícitos:
    - Não faz parsing de argumentos de linha de comando
    - Não imprime nem registra nada em terminal
"""
