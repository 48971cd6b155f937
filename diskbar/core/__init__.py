"""Shared runtime plumbing: configuration and logging."""
