"""fec_pipeline package.

Contains modules for reading FEC electronic filings: detecting a file's
software version and delimiter, splitting (and repairing) delimited lines,
resolving the positional schema for each row type and version, and mapping
raw rows into labeled records through a per-filing Translator.

Architecture:
- schema/: row-type keyword patterns and the embedded version-keyed schema table
- parse/: line splitting with malformed-line recovery, header detection
- translate/: conversion / combination rules, aliases and bundled rule packs
- Filing ties these together; ingest/ and load/ are thin I/O around it
"""

__all__ = ["__version__", "DEFAULT_VERSION"]
__version__ = "0.1.0"

# Version assumed when a schema is requested without a filing.
DEFAULT_VERSION = "8.0"
