"""Bridges between restshim messages and third-party HTTP libraries."""
