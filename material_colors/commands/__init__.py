"""Command modules.

Every .py file in this package that defines a `command` object is
auto-registered by material_colors.registry.discover(). Modules whose name
starts with '_' are helpers, not commands.
"""
