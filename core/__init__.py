# Path: core/__init__.py
# Purpose: Package initializer for core application layer.
# Layer: core.
# Details: Holds the tasks, indexing, and models subpackages; import them directly.
