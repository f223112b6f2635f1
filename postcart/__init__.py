"""Postmark client, webhook models and helper tools for sending postcards by e-mail."""

__version__ = "0.1.0"