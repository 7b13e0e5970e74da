"""Application layer: ports consumed by the dictionary and its loaders."""
