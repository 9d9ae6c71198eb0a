"""Numerical experiments: BMP image compression, particle, gravity and ray-casting models, automata and primes."""

__version__ = "0.1.0"