"""Logging and configuration plumbing."""
