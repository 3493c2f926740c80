"""File tagging core: tags and entities, a query language, fingerprints, path and terminal helpers."""

__version__ = "0.7.5"