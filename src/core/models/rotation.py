from typing import List, Iterator
from dataclasses import dataclass, field

class RotationDirection:
    LEFT = "LEFT"
    RIGHT = "RIGHT"

class ImbalanceCase:
    """
    Os quatro casos de desbalanceamento da AVL.
    O nome indica o caminho (a partir do nó desbalanceado) até a chave inserida.
    """
    LEFT_LEFT = "LL"    # Rotação simples à direita
    RIGHT_RIGHT = "RR"  # Rotação simples à esquerda
    LEFT_RIGHT = "LR"   # Esquerda no filho, depois direita no nó
    RIGHT_LEFT = "RL"   # Direita no filho, depois esquerda no nó

@dataclass(frozen=True)
class RotationStep:
    """Uma rotação simples centrada no nó de chave `pivot`."""
    direction: str
    pivot: int
    case: str

    def describe(self) -> str:
        label = "Left" if self.direction == RotationDirection.LEFT else "Right"
        return f"{label} Rotation on Node: {self.pivot}"

    def __repr__(self):
        return f"[{self.case}] {self.direction} @ {self.pivot}"

@dataclass
class InsertionReport:
    """
    Resultado de uma inserção: as rotações aplicadas, em ordem cronológica
    (de baixo para cima). Lista vazia = nenhuma rotação foi necessária.
    Não afeta o estado da árvore.
    """
    key: int
    steps: List[RotationStep] = field(default_factory=list)

    @property
    def rotated(self) -> bool:
        return len(self.steps) > 0

    def add(self, direction: str, pivot: int, case: str):
        self.steps.append(RotationStep(direction, pivot, case))

    def describe(self) -> str:
        """Texto no formato do painel de passos: 'Insert 30: Left Rotation on Node: 10'."""
        if not self.steps:
            return f"Insert {self.key}: No rotation."
        return f"Insert {self.key}: " + ", ".join(step.describe() for step in self.steps)

    def __iter__(self) -> Iterator[RotationStep]:
        return iter(self.steps)

    def __len__(self) -> int:
        return len(self.steps)
