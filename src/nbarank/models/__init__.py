"""Canonical record models shared across ingestion and analysis layers."""

from .season import SeasonRecord

__all__ = ["SeasonRecord"]
