"""Competitive-programming algorithms: numbers, primes, recurrences, graphs, flows, scheduling and geometry."""

__version__ = "0.1.0"