"""Parsers, contexts, workflow commands and metadata for GitHub Actions steps."""