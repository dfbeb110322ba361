"""
Speedboat API schema definitions

Any schema has a base name and any of the following extended names:
 * ``Creation`` to create a new instance of that schema
 * ``Patch`` to modify an existing instance of that schema

The difference between a creation and a patch is the fact that only
the keys actually sent by the client are applied with a patch. Any
field of the original model that should not be affected by some
proposed change can therefore just be omitted with a patch.

Request bodies wrap those schemas in an envelope named after the
resource, e.g. ``{"speedboat": {...}}``, see ``SpeedboatCreationBody``.

This package also contains the ``config`` module, but it's not
exported by default, since it's currently only used internally.
"""

from .bases import *
from .errors import *
