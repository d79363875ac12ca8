"""Canonicalization, signing, envelope parsing and HTTP transport."""
