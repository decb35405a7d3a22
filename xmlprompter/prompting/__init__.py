"""Prompting package.

This package contains deterministic prompt-construction helpers: the model
registry, the six format renderers, validation and complexity scoring, the
enrichment-level table and the enrichment prompt builder. It does not perform
I/O or model invocation.
"""
