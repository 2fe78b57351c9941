"""
UI components module.
"""

from .schematic_view import SchematicView

__all__ = ["SchematicView"]
