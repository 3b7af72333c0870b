"""Schema validation for registry entries.

Validation is delegated to ``jsonschema``; this package only compiles the
schemas, runs them over each entry and collects the outcomes.
"""
