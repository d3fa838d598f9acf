"""Pydantic models for formview configuration."""

from formview.models.config import RenderConfig

__all__ = ["RenderConfig"]
