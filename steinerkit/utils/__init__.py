"""Instance file loaders."""
