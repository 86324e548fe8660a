"""Shared configuration, errors, logging, and value types.

This module holds cross-cutting pieces used by every other package.
"""
