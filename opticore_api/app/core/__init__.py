"""Settings, logging, error taxonomy and the authorization gate."""
