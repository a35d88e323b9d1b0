"""Shared helpers: subprocess shim, output decoding and display formatting."""
