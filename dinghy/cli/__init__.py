"""CLI package exports for top-level command entry points."""

from __future__ import annotations

from .main import DinghyModalCLI, main

__all__ = ['DinghyModalCLI', 'main']
