from typing import List, Optional, Dict, Any, Tuple

from src.core.structures.avl_tree import AVLTree
from src.core.models.rotation import InsertionReport
from src.core.layout.tree_layout import TreeLayout, format_structure, Position

class InsertionPlayer:
    """
    Reprodutor da sequência de inserções.
    Insere uma chave por passo (o que o timer da interface faria a cada
    INSERT_INTERVAL_MS), registra os passos de rotação no log e guarda os
    snapshots de layout antes/depois para a animação.
    """
    DEFAULT_KEYS = [12, 22, 91, 13, 16, 14, 15, 17, 18, 19, 20, 21, 23, 24, 25, 26, 27, 28, 29, 30]
    INSERT_INTERVAL_MS = 1000
    ANIMATION_FRAMES = 20
    LOG_LIMIT = 50

    def __init__(self, tree: Optional[AVLTree] = None, keys: Optional[List[int]] = None,
                 interval_ms: int = INSERT_INTERVAL_MS, layout: Optional[TreeLayout] = None,
                 verbose: bool = True):
        if interval_ms <= 0:
            raise ValueError("O intervalo entre inserções deve ser maior que zero.")

        self.tree = tree if tree is not None else AVLTree()
        self.keys = list(keys) if keys is not None else list(self.DEFAULT_KEYS)
        self.interval_ms = interval_ms
        self.layout = layout if layout is not None else TreeLayout()
        self.verbose = verbose

        self.current_index = 0
        self.reports: List[InsertionReport] = []
        self.logs: List[str] = []
        self.last_transition: Optional[Tuple[Dict[int, Position], Dict[int, Position]]] = None

    @property
    def is_finished(self) -> bool:
        return self.current_index >= len(self.keys)

    @property
    def remaining(self) -> List[int]:
        return self.keys[self.current_index:]

    def step(self) -> Optional[InsertionReport]:
        """Insere a próxima chave. Retorna None quando a sequência acabou."""
        if self.is_finished:
            return None

        key = self.keys[self.current_index]
        start = self.layout.compute_positions(self.tree.root)

        report = self.tree.insert(key)

        end = self.layout.compute_positions(self.tree.root)
        self.last_transition = (start, end)
        self.current_index += 1
        self.reports.append(report)
        self.log(report.describe())

        return report

    def run(self) -> List[InsertionReport]:
        """Executa todos os passos restantes."""
        reports = []
        while not self.is_finished:
            reports.append(self.step())
        if self.verbose:
            print(f"[AVL INFO] Sequência concluída: {len(self.tree)} nós, altura {self.tree.height}")
        return reports

    def restart(self):
        """Esvazia a árvore e volta ao início da sequência."""
        self.tree.reset()
        self.current_index = 0
        self.reports = []
        self.logs = []
        self.last_transition = None

    def transition_frames(self, count: int = ANIMATION_FRAMES) -> List[Dict[int, Position]]:
        """Quadros interpolados da última inserção (vazio antes do primeiro passo)."""
        if self.last_transition is None:
            return []
        start, end = self.last_transition
        return self.layout.frames(start, end, count)

    def snapshot(self) -> Dict[str, Any]:
        """Estado atual para o painel de texto."""
        root = self.tree.root
        return {
            'preorder': self.tree.preorder(),
            'inorder': self.tree.inorder(),
            'postorder': self.tree.postorder(),
            'height': self.tree.height,
            'root': root.key if root else None,
            'structure': format_structure(self.tree),
        }

    def log(self, msg: str):
        if self.verbose:
            print(msg)
        self.logs.append(msg)
        # Mantém apenas os últimos LOG_LIMIT registros
        if len(self.logs) > self.LOG_LIMIT:
            self.logs.pop(0)
