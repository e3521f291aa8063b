# src/tfdocs/core/config/extract.py
"""
Projeção da configuração resolvida nas estruturas dos subsistemas.

Mapeamento puro e total: assume uma `Config` já normalizada e validada e
não realiza nenhuma validação.
"""

from __future__ import annotations

from typing import Tuple

from tfdocs.module.options import ModuleOptions, SortBy
from tfdocs.render.settings import RenderSettings

from .model import Config
from .sections import Section


def extract(config: Config) -> Tuple[RenderSettings, ModuleOptions]:
    """Constrói `RenderSettings` e `ModuleOptions` a partir da `Config`."""
    sections = config.sections
    sort = config.sort

    # ordenação secundária só vale com ordenação habilitada
    sort_by_name = sort.enabled
    sort_by_required = sort.enabled and sort.by.required
    sort_by_type = sort.enabled and sort.by.type

    settings = RenderSettings(
        show_header=sections.is_visible(Section.HEADER),
        show_inputs=sections.is_visible(Section.INPUTS),
        show_outputs=sections.is_visible(Section.OUTPUTS),
        show_providers=sections.is_visible(Section.PROVIDERS),
        show_requirements=sections.is_visible(Section.REQUIREMENTS),
        output_values=config.output_values.enabled,
        sort_by_name=sort_by_name,
        sort_by_required=sort_by_required,
        sort_by_type=sort_by_type,
        escape_characters=config.settings.escape,
        indent_level=config.settings.indent,
        show_color=config.settings.color,
        show_required=config.settings.required,
        show_sensitivity=config.settings.sensitive,
    )

    options = ModuleOptions(
        header_from_file=config.header_from,
        show_header=settings.show_header,
        output_values=config.output_values.enabled,
        output_values_path=config.output_values.from_,
        sort_by=SortBy(
            name=sort_by_name,
            required=sort_by_required,
            type=sort_by_type,
        ),
    )

    return settings, options
