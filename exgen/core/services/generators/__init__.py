"""
Generators — produce document sources from exercise metadata.

Each generator module exposes functions that return ``GeneratedFile``
instances, and a writer entry point that persists them.
"""
