"""GitHub Activity CLI - browse a GitHub user's public event feed."""

__version__ = "2.0.0"
