"""Module that fails while being imported."""

msg = "FIGHT_DB_URL is not set"
raise RuntimeError(msg)
