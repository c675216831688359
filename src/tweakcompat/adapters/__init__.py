"""Adapters binding the domain ports to GitHub and the local filesystem."""
