"""
Concrete implementations of the layerconf domain contracts.
"""
