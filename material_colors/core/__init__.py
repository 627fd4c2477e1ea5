"""material_colors.core: Foundation layer.

Contains the catalog, the searchable index, the format renderer, the colour
parser, user config and the report builder. This module has NO dependencies
on material_colors.commands or material_colors.registry.
Only stdlib, numpy and PIL are allowed here.
"""
