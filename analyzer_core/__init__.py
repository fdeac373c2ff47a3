"""Core logic for indicator calculation and signal synthesis.

This package contains pure business logic with no I/O dependencies
(no network or file access). It is shared by the HTTP API and the
tool server in analyzer_app/.
"""
