"""
ttestkit.core
=============

Shared infrastructure: error taxonomy, typed names and numerical settings.
"""
