"""UK launderette directory API."""
