"""
Visualization module for steelhinge
"""

from .plotter import plot_backbone

__all__ = ['plot_backbone']
