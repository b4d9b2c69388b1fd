"""Language catalog and heuristic detection.

Use explicit imports:
    from lingoproxy.services.language.catalog import catalog
    from lingoproxy.services.language.detector import LanguageDetector
"""
