"""Bundled message catalogs (``locale-<code>.properties``)."""
