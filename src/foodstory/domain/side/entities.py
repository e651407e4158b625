from __future__ import annotations

from dataclasses import dataclass

from foodstory.domain.common.ids import SideId


@dataclass(frozen=True)
class Side:
    side_id: SideId
    nom: str
    emoji: str
    actif: bool = True

    def toggled(self) -> Side:
        return Side(
            side_id=self.side_id,
            nom=self.nom,
            emoji=self.emoji,
            actif=not self.actif,
        )


class SideNotFoundError(Exception):
    def __init__(self, side_id: SideId) -> None:
        super().__init__("Accompagnement non trouvé")
        self.details = {"id": int(side_id)}
