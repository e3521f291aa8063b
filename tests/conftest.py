"""
Fixtures compartilhados para testes do tfdocs.

Este módulo define fixtures reutilizáveis que fornecem:
- configurações com defaults, isoladas por teste
- construtores de rastreadores de flags sintéticos
- contextos de resolução controlados

Decisões arquiteturais:
    - Fixtures são mantidas simples e explícitas
    - Nenhuma fixture depende de argparse ou do adapter de CLI
    - Imports do core são realizados de forma lazy para
      melhorar a clareza de erros durante falhas

Invariantes:
    - Nenhuma fixture realiza I/O
    - Cada teste recebe instâncias novas (sem estado compartilhado)
"""

import pytest


COMMAND = "terraform-docs markdown table"


@pytest.fixture
def command() -> str:
    """Comando invocado típico; o formatter derivado é "markdown table"."""
    return COMMAND


@pytest.fixture
def cfg():
    """`Config` com todos os defaults, nova a cada teste."""
    from tfdocs.core.config import default_config

    return default_config()


@pytest.fixture
def changed():
    """
    Construtor de `ChangedFlags` sintéticos.

    Uso:
        changed("sort", "no-sort")
    """
    from tfdocs.core.config import ChangedFlags

    def _make(*flags):
        return ChangedFlags.of(*flags)

    return _make


@pytest.fixture
def make_ctx(changed):
    """Construtor de `ResolutionContext` a partir de nomes de flags."""
    from tfdocs.core.config import ResolutionContext

    def _make(*flags):
        return ResolutionContext(changed=changed(*flags))

    return _make
