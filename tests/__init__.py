"""
Tests for Specimen Lattice

This package contains tests for:
- Profile and lattice generation
- Boolean combination and fallback behavior
- Specimen validation and solid checks
- Pipeline, export and CLI
"""
