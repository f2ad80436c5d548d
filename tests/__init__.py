"""
Test suite for lagrange-recovery

Contains:
- tests/unit/          : Unit tests for arithmetic, decoding, contracts,
                         the recovery pipeline and the CLI
"""
