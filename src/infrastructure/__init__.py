"""Infrastructure adapters: database, settings, logging, wiring."""
