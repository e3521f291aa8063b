"""Contrato de saída para o subsistema de parsing de módulos."""

from .options import ModuleOptions, SortBy

__all__ = ["ModuleOptions", "SortBy"]
