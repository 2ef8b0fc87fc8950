"""Chirpy: a small social-posting backend."""
