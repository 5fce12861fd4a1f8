import os
from typing import Dict, List, Optional

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.patches import Circle

from src.core.structures.avl_tree import AVLTree
from src.core.layout.tree_layout import TreeLayout, Position

class TreePlot:
    """
    Desenha um snapshot da AVL com matplotlib: arestas, nós com a chave
    e o fator de balanceamento (BF) abaixo de cada nó.
    Coordenadas de tela (y cresce para baixo), por isso o eixo y é invertido.
    """
    PATH_OUTPUT = "data/avl_tree.png"
    NODE_RADIUS = 20
    NODE_COLOR = "#ff6464"
    EDGE_COLOR = "#6496ff"
    BF_COLOR = "#c964ff"

    def __init__(self, layout: Optional[TreeLayout] = None):
        self.layout = layout if layout is not None else TreeLayout()

    def draw(self, tree: AVLTree, positions: Optional[Dict[int, Position]] = None, ax=None, title: str = ""):
        if positions is None:
            positions = self.layout.compute_positions(tree.root)
        if ax is None:
            _, ax = plt.subplots(figsize=(12, 7))

        # 1. Arestas (atrás dos nós)
        self._draw_edges(tree.root, positions, ax)

        # 2. Nós
        self._draw_nodes(tree, tree.root, positions, ax)

        ax.set_xlim(0, self.layout.width)
        max_y = max((y for _, y in positions.values()), default=self.layout.TOP_MARGIN)
        ax.set_ylim(max_y + self.layout.LEVEL_GAP, 0)
        ax.set_aspect("equal")
        ax.axis("off")
        if title:
            ax.set_title(title)
        return ax

    def _draw_edges(self, node, positions: Dict[int, Position], ax):
        if not node:
            return
        x, y = positions[node.key]
        for child in (node.left, node.right):
            if child:
                cx, cy = positions[child.key]
                ax.plot([x, cx], [y, cy], color=self.EDGE_COLOR, linewidth=2, zorder=1)
                self._draw_edges(child, positions, ax)

    def _draw_nodes(self, tree: AVLTree, node, positions: Dict[int, Position], ax):
        if not node:
            return
        x, y = positions[node.key]
        ax.add_patch(Circle((x, y), self.NODE_RADIUS, facecolor=self.NODE_COLOR, edgecolor="white", zorder=2))
        ax.text(x, y, str(node.key), ha="center", va="center", color="white", fontweight="bold", zorder=3)
        ax.text(x, y + self.NODE_RADIUS + 14, f"BF: {tree.get_balance(node)}",
                ha="center", va="center", color=self.BF_COLOR, fontsize=8, zorder=3)
        self._draw_nodes(tree, node.left, positions, ax)
        self._draw_nodes(tree, node.right, positions, ax)

    def save(self, tree: AVLTree, filepath: str = PATH_OUTPUT, title: str = "") -> bool:
        """Salva o snapshot atual em PNG. Retorna False se a escrita falhar."""
        fig, ax = plt.subplots(figsize=(12, 7))
        try:
            self.draw(tree, ax=ax, title=title)
            directory = os.path.dirname(filepath)
            if directory:
                os.makedirs(directory, exist_ok=True)
            fig.savefig(filepath)
            return True
        except Exception as e:
            print(f"[IO Erro] Falha ao salvar imagem: {e}")
            return False
        finally:
            plt.close(fig)

    def save_transition(self, tree: AVLTree, frames: List[Dict[int, Position]], filepath_pattern: str) -> List[str]:
        """
        Salva cada quadro da animação usando `filepath_pattern` com {index}
        (ex.: 'data/frames/step_{index:03d}.png'). Retorna os caminhos escritos.
        """
        written = []
        for index, positions in enumerate(frames):
            path = filepath_pattern.format(index=index)
            fig, ax = plt.subplots(figsize=(12, 7))
            try:
                self.draw(tree, positions=positions, ax=ax)
                directory = os.path.dirname(path)
                if directory:
                    os.makedirs(directory, exist_ok=True)
                fig.savefig(path)
                written.append(path)
            except Exception as e:
                print(f"[IO Erro] Falha ao salvar quadro {index}: {e}")
            finally:
                plt.close(fig)
        return written
