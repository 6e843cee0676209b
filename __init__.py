"""
Monotone Chains Package

This package provides a modular implementation of point location in a
planar straight-line graph with the monotone-chain method, including:

- Graph regularization
- Weight balancing
- Chain extraction
- Point location among chains
- Session loading and output visualization utilities
"""
__all__ = [
    "config",
    "main",
    "models",
    "subdivision",
    "utils",
    "visualization",
]
