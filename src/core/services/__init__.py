"""Pure helpers shared by the views (no I/O)."""
