"""Testing – doubles for code that depends on the search engine."""
