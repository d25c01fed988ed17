"""Application services built on the retrieval engine."""
