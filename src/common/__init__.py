"""
Cross-cutting helpers: settings, logging, database engine and table metadata.
"""
