"""Application layer: adapter ports and export line handling."""
