"""HTTP API for the Inkwell application."""
