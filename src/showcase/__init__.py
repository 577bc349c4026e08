"""Showcase - one randomized gallery of public projects from several sites."""

__version__ = "0.1.0"
