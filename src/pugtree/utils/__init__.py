"""Shared helpers for pugtree."""
