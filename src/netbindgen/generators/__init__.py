"""Source code generators."""
