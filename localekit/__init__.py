"""localekit - message catalogs with language fallback."""
