"""
Core algebraic primitives and the closed-form Fibonacci computation.

This module contains exact arithmetic building blocks (rationals, quadratic
field extensions, fast exponentiation) and the Fibonacci code built on them.
No I/O, no shared mutable state: every operation is a pure function.
"""
