"""Lexer, macro pre-processor, include resolution, diagnostics and formatter for goboscript sources."""

__version__ = "0.1.0"