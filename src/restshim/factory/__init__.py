"""Factories for host errors, responses and permission callbacks."""
