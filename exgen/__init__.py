"""
exgen — exercise document generator for the Abramson (2021) solutions series.
"""

__version__ = "0.1.0"
