"""Bundled bodies of the generated project files."""
