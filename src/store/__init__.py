"""Record storage transports.

This module persists finished records and reads them back by id.
It also provides the SDK client that wires transports to the serializer.
"""
