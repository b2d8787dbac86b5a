"""Talent procurement pricing engine.

Resolves the time-boxed fee/discount/tax configuration in force for each
platform of a client and reduces it to a quotation coefficient.
"""

__version__ = "5.1.0"
