"""Object graph serialization.

This module decomposes nested objects into content-addressed records.
It also reassembles graphs from records held by a transport.
"""
