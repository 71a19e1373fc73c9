"""
Domain contracts for layerconf.

Backend-agnostic protocols, value objects and errors shared by every layer
kind. Nothing in this package imports NumPy or infrastructure modules.
"""
