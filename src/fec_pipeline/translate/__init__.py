"""Translation rules applied while mapping rows.

Provides the per-filing `Translator` (convert rules, combine rules and
aliases), the alias-aware `Record` it produces, and the bundled rule packs
that normalize person names and dates across filing versions.
"""
