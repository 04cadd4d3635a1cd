from dataclasses import dataclass

@dataclass(slots=True)
class Score:
    """Cells cleared so far. Only ever increases."""
    value: int = 0
