"""
Problem-specific implementations for experimental layouts.

Available schemes:
- `two_sample`: two independent samples compared on their means
"""
