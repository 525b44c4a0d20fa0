"""Core of unifmt: catalog, filtering and the batch runner."""
