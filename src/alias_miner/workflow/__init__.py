"""Configuration, reporting and command line wiring."""
