"""Source document ingestion.

This module reads JSON and YAML documents into plain object graphs.
It prepares root objects for the serializer.
"""
