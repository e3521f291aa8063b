# src/tfdocs/core/config/flags.py
"""
Rastreador de flags explicitamente informadas (Changed-Flag Tracker).

A resolução precisa distinguir "o usuário escolheu explicitamente o valor
default" de "o usuário nunca tocou nesta flag". O binding de flags
registra, por nome de flag, se ela foi informada; este módulo expõe esse
registro como um objeto imutável passado explicitamente à normalização e
à validação.

Decisões arquiteturais:
    - Nenhum estado global: cada invocação possui seu próprio `ChangedFlags`
    - O core apenas lê o rastreador, nunca o altera
    - Nomes de flags são strings no formato da CLI (ex.: "no-sort")

Invariantes:
    - Um `ChangedFlags` nunca muda após criado
    - `Flag.SORT` e "sort" são equivalentes em consultas
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Iterable, Iterator, Mapping, Union


class Flag(str, Enum):
    """
    Flags cujo uso explícito influencia a resolução.

    Os valores são exatamente os nomes usados na linha de comando.
    """

    SHOW_ALL = "show-all"
    HIDE_ALL = "hide-all"
    NO_HEADER = "no-header"
    NO_INPUTS = "no-inputs"
    NO_OUTPUTS = "no-outputs"
    NO_PROVIDERS = "no-providers"
    NO_REQUIREMENTS = "no-requirements"
    OUTPUT_VALUES_FROM = "output-values-from"
    SORT = "sort"
    NO_SORT = "no-sort"
    ESCAPE = "escape"
    NO_ESCAPE = "no-escape"
    COLOR = "color"
    NO_COLOR = "no-color"
    REQUIRED = "required"
    NO_REQUIRED = "no-required"
    SENSITIVE = "sensitive"
    NO_SENSITIVE = "no-sensitive"


FlagName = Union[Flag, str]


def flag_name(flag: FlagName) -> str:
    if isinstance(flag, Flag):
        return flag.value
    return str(flag)


@dataclass(frozen=True)
class ChangedFlags:
    """
    Conjunto imutável de flags explicitamente informadas pelo usuário.

    Aceita qualquer nome de flag (inclusive flags que não influenciam a
    resolução, como `indent`), pois o binding registra tudo o que recebeu.
    """

    names: FrozenSet[str] = frozenset()

    @classmethod
    def of(cls, *flags: FlagName) -> "ChangedFlags":
        return cls(frozenset(flag_name(f) for f in flags))

    @classmethod
    def from_iterable(cls, flags: Iterable[FlagName]) -> "ChangedFlags":
        return cls.of(*flags)

    @classmethod
    def from_mapping(cls, changed: Mapping[FlagName, bool]) -> "ChangedFlags":
        """Constrói a partir do mapa `nome -> foi informada` do binding."""
        return cls.of(*(name for name, was_set in changed.items() if was_set))

    def is_set(self, flag: FlagName) -> bool:
        return flag_name(flag) in self.names

    def __contains__(self, flag: object) -> bool:
        if not isinstance(flag, (Flag, str)):
            return False
        return self.is_set(flag)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.names))

    def __len__(self) -> int:
        return len(self.names)
