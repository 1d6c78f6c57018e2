"""Low level interfaces shared across the sdk."""
