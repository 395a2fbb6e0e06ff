"""
Core domain models, conversion math, and contracts.

This module contains the building blocks of a conversion, independent of any
presentation or storage layer.
"""
