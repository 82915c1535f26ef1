"""Console rendering of camp summaries."""
