"""Low-level reading of filing lines.

Provides strict and recovering splitters for delimited lines and detection
of a filing's version and delimiter from its header line.
"""
