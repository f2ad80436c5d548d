"""
Core arithmetic, domain models and contracts.

This module contains the foundational building blocks that are independent
of input/output: exact fractions, base-N decoding, Lagrange evaluation,
sample points and the input document contract.
"""
