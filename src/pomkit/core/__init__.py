"""Core building blocks shared across pomkit."""
