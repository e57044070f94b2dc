"""
Utils module - Shared utilities for pairrank

This module provides common utilities used across the project:
- paths: Common path definitions and environment switches
- logging_helper: Consistent logging setup
- io_helpers: File I/O with proper encoding
- text_processing: Label cleaning and normalization
"""
