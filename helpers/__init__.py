"""Pure helpers shared by services - no I/O, no logging."""
