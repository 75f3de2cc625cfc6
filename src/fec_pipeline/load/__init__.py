"""Loading of mapped rows into dataframes and MongoDB.

Provides tabulation of a filing's rows with pandas (or Dask, for many
filings at once) and an idempotent upsert of mapped rows into a MongoDB
collection.
"""
