"""
Visualization module for lattice PMFs.

This module contains plotting utilities used when debugging PMF combinations.
"""

from .pmf_plots import plot_pmf_1d, plot_pmf_2d

__all__ = ['plot_pmf_1d', 'plot_pmf_2d']
