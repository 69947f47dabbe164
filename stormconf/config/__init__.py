"""
stormconf Configuration Module

Typed configuration schema for topology clusters: the catalogue of
recognized keys and their validators, the layered configuration map with its
seal step, accumulator helpers for list-valued registrations, and the
loaders for defaults, cluster and job documents.

Author: stormconf Project
License: MIT
"""

__version__ = "0.1.0"
