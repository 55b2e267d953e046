"""Filma API : CRUD HTTP sur la table des films."""

__version__ = "1.0.0"
