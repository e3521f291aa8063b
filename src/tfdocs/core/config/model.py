# src/tfdocs/core/config/model.py
"""
Modelo da configuração de flags do tfdocs.

A `Config` é a raiz agregada: identidade do formatter, caminho de origem do
header e uma instância de cada seleção (seções, output values, ordenação e
settings de exibição). Cada par legado/atual é logicamente um único
booleano com duas representações; o espelho legado vive em `deprecated`.

Ciclo de vida:
    - criada com defaults (`default_config`)
    - populada pelo binding de flags (diretamente ou via `config_from_mapping`)
    - normalizada → validada → projetada exatamente uma vez por invocação

Invariantes:
    - `header_from` default é "main.tf" e nunca pode ser vazio
    - `sort.by.required` e `sort.by.type` não podem ser ambos verdadeiros
    - `output_values.enabled` exige `output_values.from_` não vazio
    - A `Config` é dona exclusiva das suas seleções (sem compartilhamento)

Limites explícitos:
    - Não lê arquivos de configuração
    - Não valida (responsabilidade de `validate`)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping

from .errors import ConfigTypeConflictError
from .merge import deep_merge
from .sections import Sections

DEFAULT_HEADER_FROM = "main.tf"
DEFAULT_INDENT = 2


@dataclass
class OutputValues:
    """Inclusão dos valores de outputs a partir de um arquivo de origem."""

    enabled: bool = False
    from_: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"enabled": self.enabled, "from": self.from_}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "OutputValues":
        return cls(enabled=data["enabled"], from_=data["from"])


@dataclass
class SortBy:
    required: bool = False
    type: bool = False


@dataclass
class LegacySort:
    no_sort: bool = False


@dataclass
class Sort:
    enabled: bool = True
    by: SortBy = field(default_factory=SortBy)
    deprecated: LegacySort = field(default_factory=LegacySort)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "enabled": self.enabled,
            "by": {"required": self.by.required, "type": self.by.type},
            "deprecated": {"no_sort": self.deprecated.no_sort},
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Sort":
        return cls(
            enabled=data["enabled"],
            by=SortBy(required=data["by"]["required"], type=data["by"]["type"]),
            deprecated=LegacySort(no_sort=data["deprecated"]["no_sort"]),
        )


@dataclass
class LegacySettings:
    no_color: bool = False
    no_escape: bool = False
    no_required: bool = False
    no_sensitive: bool = False


@dataclass
class Settings:
    """Settings de exibição consumidos pelo renderizador."""

    color: bool = True
    escape: bool = True
    indent: int = DEFAULT_INDENT
    required: bool = True
    sensitive: bool = True
    deprecated: LegacySettings = field(default_factory=LegacySettings)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "color": self.color,
            "escape": self.escape,
            "indent": self.indent,
            "required": self.required,
            "sensitive": self.sensitive,
            "deprecated": {
                "no_color": self.deprecated.no_color,
                "no_escape": self.deprecated.no_escape,
                "no_required": self.deprecated.no_required,
                "no_sensitive": self.deprecated.no_sensitive,
            },
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Settings":
        return cls(
            color=data["color"],
            escape=data["escape"],
            indent=data["indent"],
            required=data["required"],
            sensitive=data["sensitive"],
            deprecated=LegacySettings(**data["deprecated"]),
        )


@dataclass
class Config:
    """
    Todas as opções de configuração acessíveis pela CLI.

    Campos:
        - formatter: identidade do formatter (derivada do comando invocado)
        - header_from: arquivo de onde o header do módulo é lido
        - sections / output_values / sort / settings: seleções por grupo
    """

    formatter: str = ""
    header_from: str = DEFAULT_HEADER_FROM
    sections: Sections = field(default_factory=Sections)
    output_values: OutputValues = field(default_factory=OutputValues)
    sort: Sort = field(default_factory=Sort)
    settings: Settings = field(default_factory=Settings)

    def to_dict(self) -> Dict[str, Any]:
        """Mapa canônico (serializável em JSON/YAML) da configuração."""
        return {
            "formatter": self.formatter,
            "header_from": self.header_from,
            "sections": self.sections.to_dict(),
            "output_values": self.output_values.to_dict(),
            "sort": self.sort.to_dict(),
            "settings": self.settings.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Config":
        return cls(
            formatter=data["formatter"],
            header_from=data["header_from"],
            sections=Sections.from_dict(data["sections"]),
            output_values=OutputValues.from_dict(data["output_values"]),
            sort=Sort.from_dict(data["sort"]),
            settings=Settings.from_dict(data["settings"]),
        )


def default_config() -> Config:
    """Retorna uma nova `Config` com todos os defaults."""
    return Config()


def config_from_mapping(overrides: Mapping[str, Any]) -> Config:
    """
    Constrói uma `Config` aplicando valores brutos sobre os defaults.

    O mapa segue o formato de `Config.to_dict()`; apenas as chaves
    informadas são sobrescritas. Chaves desconhecidas são rejeitadas.

    Raises:
        ConfigTypeConflictError: Se um valor tiver tipo incompatível com o default
            ou se uma chave não existir no modelo.
    """
    defaults = default_config().to_dict()
    merged = deep_merge(defaults, overrides)
    _reject_unknown_keys(defaults, merged)
    return Config.from_dict(merged)


def _reject_unknown_keys(
    reference: Mapping[str, Any], data: Mapping[str, Any], prefix: str = ""
) -> None:
    for key, value in data.items():
        path = f"{prefix}{key}"
        if key not in reference:
            raise ConfigTypeConflictError(
                f"unknown configuration key '{path}'",
                details={"key": path},
            )
        if isinstance(value, Mapping):
            _reject_unknown_keys(reference[key], value, prefix=path + ".")
