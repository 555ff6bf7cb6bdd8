"""Unit tests that run without a browser or a target application."""
