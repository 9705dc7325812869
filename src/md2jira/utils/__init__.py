#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Shared utilities for md2jira: encoding detection, output writing and decorators."""
