"""Property-based tests for eitherfx.

Hypothesis generates Either values to check the algebraic laws and the
short-circuit guarantees of the scopes.
"""
