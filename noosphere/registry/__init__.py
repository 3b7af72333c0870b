"""Registry — the JSON document listing known containers and verifiers.

The registry layer provides:
- Loading: read the registry and its two entry schemas from disk
- Models: typed views over the registry document and validation outcomes
"""
