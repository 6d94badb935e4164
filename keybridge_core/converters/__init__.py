# keybridge_core/converters/__init__.py
from keybridge_core.converters import dsa_converter, rsa_converter

__all__ = ["rsa_converter", "dsa_converter"]
