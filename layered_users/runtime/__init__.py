"""Runtime support: settings, logging and database access."""
