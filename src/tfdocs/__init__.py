# src/tfdocs/__init__.py
"""
tfdocs — camada de resolução de configuração da CLI de documentação
de módulos Terraform.

Este pacote raiz define o namespace público da resolução de flags:
recebe a configuração bruta produzida pelo binding de flags (incluindo
o conjunto legado de flags negativas e o conjunto atual de flags
positivas), reconcilia as duas gerações, valida o resultado e projeta
a configuração final nas estruturas consumidas pelos subsistemas de
renderização e de parsing de módulos.

Arquitetura em alto nível:
    - core.config → modelo, normalização, validação e projeção
    - core.errors → payload canônico e serializável de erros
    - render      → `RenderSettings` (contrato com o renderizador)
    - module      → `ModuleOptions` (contrato com o parser de módulos)
    - cli         → adapter fino de argparse (binding de flags)

Limites explícitos:
    - Não renderiza documentos
    - Não lê arquivos Terraform nem arquivos de configuração
    - Não decide precedência entre fontes de configuração
"""

from .core.config import (
    ChangedFlags,
    Config,
    ConfigError,
    Flag,
    Resolution,
    ResolutionContext,
    Section,
    default_config,
    resolve,
)
from .module.options import ModuleOptions, SortBy
from .render.settings import RenderSettings

__all__ = [
    "ChangedFlags",
    "Config",
    "ConfigError",
    "Flag",
    "ModuleOptions",
    "RenderSettings",
    "Resolution",
    "ResolutionContext",
    "Section",
    "SortBy",
    "default_config",
    "resolve",
]
