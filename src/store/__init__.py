"""Trade persistence layer.

This module writes parsed trade batches to a relational store
inside one transaction and reads stored trades back for the SDK.
"""
