"""
steelhinge - nonlinear hinge parameters for steel beams, braces and columns.

Calculates backbone and acceptance parameters from section geometry and
writes them as hinge definitions into SAP2000 $2k model files.
"""

__version__ = "0.1.0"
