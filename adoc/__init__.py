# adoc/__init__.py
"""
adoc package initializer.
Defines the package version; the CLI lives in :mod:`adoc.cli`.
"""
__version__ = "0.1.0"
