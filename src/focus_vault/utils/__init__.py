"""Pure helpers: formatting, calendar windows, validation."""
