# src/tfdocs/core/config/resolver.py
"""
Pipeline de resolução: normalize → validate → extract.

Executado uma vez por invocação da CLI, de forma síncrona e sem pontos de
suspensão. Cada etapa registra um evento estruturado no
`ResolutionContext`; uma falha de validação é registrada e propagada sem
recuperação.
"""

from __future__ import annotations

from dataclasses import dataclass

from tfdocs.module.options import ModuleOptions
from tfdocs.render.settings import RenderSettings

from .context import ResolutionContext
from .errors import ConfigError
from .extract import extract
from .model import Config
from .normalize import deprecation_warnings, effective_toggles, normalize
from .validate import validate


@dataclass(frozen=True)
class Resolution:
    """Resultado de uma resolução bem-sucedida."""

    config: Config
    settings: RenderSettings
    options: ModuleOptions


def resolve(config: Config, ctx: ResolutionContext, *, command: str) -> Resolution:
    """
    Resolve a configuração bruta nas estruturas dos subsistemas.

    Args:
        config: Configuração populada pelo binding (alterada in-place).
        ctx: Contexto da invocação, com o rastreador de flags.
        command: Comando invocado (ex.: "terraform-docs markdown table").

    Raises:
        ConfigError: Primeiro conflito encontrado na validação.
    """
    changed = ctx.changed

    normalize(config, changed, command)
    ctx.log(
        stage="normalize",
        level="DEBUG",
        message="configuration normalized",
        formatter=config.formatter,
        toggles=effective_toggles(config),
    )
    for message in deprecation_warnings(changed):
        ctx.add_warning(stage="normalize", message=message)

    try:
        validate(config, changed)
    except ConfigError as exc:
        ctx.log(
            stage="validate",
            level="ERROR",
            message=exc.message,
            error=exc.to_payload().to_dict(),
        )
        raise
    ctx.log(stage="validate", level="DEBUG", message="configuration is valid")

    settings, options = extract(config)
    ctx.log(stage="extract", level="DEBUG", message="settings and options extracted")

    return Resolution(config=config, settings=settings, options=options)
