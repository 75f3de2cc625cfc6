"""Row-type patterns and the versioned schema table.

Provides the fixed keyword → pattern registry used to classify rows and the
embedded schema table that maps each (row type, version) pair to its ordered
field names.
"""
