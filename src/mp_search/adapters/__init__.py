"""Adapters – record-store integrations for the search engine."""
