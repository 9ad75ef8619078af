"""Public API for the XML DOM facade.

Progressive API disclosure:
- Level 1: Simple functions - root_of(), root_of_file()
- Level 2: The XmlElement facade with paired optional/strict accessors
"""

from .element import XmlElement, root_of, root_of_file

__all__ = [
    "XmlElement",
    "root_of",
    "root_of_file",
]
