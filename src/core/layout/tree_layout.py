from typing import Dict, List, Optional, Tuple
import numpy as np

from src.core.structures.avl_tree import AVLTree, AVLNode

Position = Tuple[float, float]

class TreeLayout:
    """
    Calcula as coordenadas de tela dos nós para a visualização.
    Fica fora da árvore: a AVL não sabe nada de posições.

    Raiz no centro do topo; cada nível desce LEVEL_GAP e o deslocamento
    horizontal começa em width/4, caindo pela metade a cada nível.
    """
    TOP_MARGIN = 50
    LEVEL_GAP = 70
    DEFAULT_WIDTH = 1000

    def __init__(self, width: float = DEFAULT_WIDTH):
        if width <= 0:
            raise ValueError("A largura do canvas deve ser maior que zero.")
        self.width = width

    def compute_positions(self, root: Optional[AVLNode]) -> Dict[int, Position]:
        """Retorna {chave: (x, y)} para todos os nós. O(n)."""
        positions: Dict[int, Position] = {}
        self._place(root, self.width / 2, self.TOP_MARGIN, self.width / 4, positions)
        return positions

    def _place(self, node, x: float, y: float, x_offset: float, positions: Dict[int, Position]):
        if not node:
            return
        positions[node.key] = (x, y)
        self._place(node.left, x - x_offset, y + self.LEVEL_GAP, x_offset / 2, positions)
        self._place(node.right, x + x_offset, y + self.LEVEL_GAP, x_offset / 2, positions)

    @staticmethod
    def interpolate(start: Dict[int, Position], end: Dict[int, Position], progress: float) -> Dict[int, Position]:
        """
        Interpolação linear entre dois snapshots de layout.
        Nós que não existiam no início (recém inseridos) aparecem direto na posição final.
        """
        if not 0.0 <= progress <= 1.0:
            raise ValueError(f"Progresso da animação fora de [0, 1]: {progress}")

        result: Dict[int, Position] = {}
        for key, end_pos in end.items():
            if key in start:
                a = np.asarray(start[key], dtype=float)
                b = np.asarray(end_pos, dtype=float)
                x, y = a + (b - a) * progress
                result[key] = (float(x), float(y))
            else:
                result[key] = end_pos
        return result

    def frames(self, start: Dict[int, Position], end: Dict[int, Position], count: int) -> List[Dict[int, Position]]:
        """Gera `count` quadros com progresso 1/count ... 1."""
        if count <= 0:
            raise ValueError("O número de quadros deve ser maior que zero.")
        return [self.interpolate(start, end, p) for p in np.linspace(1.0 / count, 1.0, count)]

def format_structure(tree: AVLTree) -> str:
    """
    Texto da estrutura em pré-ordem, uma linha por nó:
    |profundidade| <recuo>Node: chave (BF: fator)
    """
    if tree.root is None:
        return "Tree is empty."
    lines: List[str] = []
    _structure_lines(tree, tree.root, 0, lines)
    return "\n".join(lines)

def _structure_lines(tree: AVLTree, node, depth: int, lines: List[str]):
    if not node:
        return
    indent = "  " * depth
    lines.append(f"|{depth}| {indent}Node: {node.key} (BF: {tree.get_balance(node)})")
    _structure_lines(tree, node.left, depth + 1, lines)
    _structure_lines(tree, node.right, depth + 1, lines)
