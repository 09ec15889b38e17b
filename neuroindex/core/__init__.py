"""
Core computation layers: ingestion, scoring, indices, summary, validation.
"""
