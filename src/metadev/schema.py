from __future__ import annotations

from typing import Dict

from pydantic import RootModel, StrictStr


class TranslationTable(RootModel[Dict[StrictStr, StrictStr]]):
    """Flat key/value translation dictionary, one per namespace file."""

    def as_dict(self) -> dict[str, str]:
        return dict(self.root)
