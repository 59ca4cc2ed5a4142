"""Algorithms and data structures for competitive programming: data
structures, arithmetic, number theory, geometry, graphs, trees and strings."""

__version__ = "0.1.0"