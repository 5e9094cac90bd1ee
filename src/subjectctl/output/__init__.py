"""Output formatting for ServiceResult (JSON, quiet, Rich)."""
