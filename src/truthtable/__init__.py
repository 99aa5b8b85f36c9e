"""
Truth Table Engine

Turns a propositional boolean expression typed by a user into:
    - the ordered list of variables it references
    - its full truth table, optionally with some variables pinned

ARCHITECTURAL GUARANTEE:
------------------------
This package contains ZERO knowledge of:
    - Forms, widgets or windows
    - Table rendering and highlighting
    - Transport between a front end and the engine

Every request is computed from scratch.
Nothing is cached or shared between calls.
"""

__version__ = "0.1.0"
