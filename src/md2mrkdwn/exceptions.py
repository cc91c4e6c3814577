"""Exceptions raised by md2mrkdwn."""


class Md2MrkdwnError(Exception):
    """Base exception for md2mrkdwn operations."""


class ParseError(Md2MrkdwnError):
    """Markdown could not be parsed, or the document is empty."""
