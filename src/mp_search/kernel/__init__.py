"""Kernel – errors and the search value objects shared by every layer."""
