# link_scout/__init__.py
"""
LinkScout package initializer.
Defines package version; the CLI lives in :mod:`link_scout.cli`.
"""
__version__ = "0.1.0"
