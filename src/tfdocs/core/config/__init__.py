# src/tfdocs/core/config/__init__.py
"""
Camada de configuração do tfdocs.

Este pacote reconcilia as duas gerações de flags da CLI (legadas negativas
e atuais positivas), valida a combinação resultante e a projeta nas
estruturas consumidas pelo renderizador e pelo parser de módulos.

Responsabilidades do pacote:
    - Modelo da configuração e seus defaults
    - Rastreamento explícito de flags informadas pelo usuário
    - Resolução de visibilidade de seções
    - Reconciliação legado/atual via tabela única
    - Validação com parada no primeiro conflito
    - Projeção em `RenderSettings` e `ModuleOptions`

Princípios fundamentais:
    - Nenhum estado global: rastreador e contexto são sempre explícitos
    - A mesma entrada sempre produz a mesma configuração final
    - Conflitos de flags são tratados como erro do usuário

Limites explícitos:
    - Não faz parsing de linha de comando
    - Não lê arquivos de configuração
    - Não decide precedência entre fontes (arquivo, env, flags)
"""

from .context import ResolutionContext
from .errors import (
    ConfigError,
    ConfigTypeConflictError,
    ConflictingLegacyFlag,
    ConflictingModeFlags,
    ConflictingSortCriteria,
    InvalidSectionName,
    MissingRequiredValue,
)
from .extract import extract
from .flags import ChangedFlags, Flag
from .merge import deep_merge
from .model import (
    Config,
    LegacySettings,
    LegacySort,
    OutputValues,
    Settings,
    Sort,
    SortBy,
    config_from_mapping,
    default_config,
)
from .normalize import LEGACY_TOGGLES, normalize, resolve_toggle
from .resolver import Resolution, resolve
from .sections import (
    LegacySections,
    Section,
    Sections,
    compute_visibility,
    finalize_modes,
    visibility,
)
from .validate import (
    validate,
    validate_header_from,
    validate_output_values,
    validate_sections,
    validate_settings,
    validate_sort,
)

__all__ = [
    "ChangedFlags",
    "Config",
    "ConfigError",
    "ConfigTypeConflictError",
    "ConflictingLegacyFlag",
    "ConflictingModeFlags",
    "ConflictingSortCriteria",
    "Flag",
    "InvalidSectionName",
    "LEGACY_TOGGLES",
    "LegacySections",
    "LegacySettings",
    "LegacySort",
    "MissingRequiredValue",
    "OutputValues",
    "Resolution",
    "ResolutionContext",
    "Section",
    "Sections",
    "Settings",
    "Sort",
    "SortBy",
    "compute_visibility",
    "config_from_mapping",
    "deep_merge",
    "default_config",
    "extract",
    "finalize_modes",
    "normalize",
    "resolve",
    "resolve_toggle",
    "validate",
    "validate_header_from",
    "validate_output_values",
    "validate_sections",
    "validate_settings",
    "validate_sort",
    "visibility",
]
