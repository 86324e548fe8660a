"""Serializable object model.

This module defines dynamic member containers the serializer decomposes.
It exposes ordered member enumeration instead of runtime reflection.
"""
