from __future__ import annotations

"""Value types used at artifact boundaries.

Translation dictionaries are flat: every key and every value is a string.
"""

from typing import TypeAlias


TranslationMap: TypeAlias = dict[str, str]
