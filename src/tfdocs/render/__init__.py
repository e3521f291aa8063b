"""Contrato de saída para o subsistema de renderização."""

from .settings import RenderSettings

__all__ = ["RenderSettings"]
