from typing import List, Optional
from src.core.models.rotation import InsertionReport, RotationDirection, ImbalanceCase

class AVLNode:
    """
    Nó interno da Árvore AVL.
    Armazena a chave e a altura da subárvore. Os campos são somente leitura
    para quem está fora da árvore; apenas AVLTree altera filhos e altura.
    """
    __slots__ = ("_key", "_height", "_left", "_right")

    def __init__(self, key: int):
        self._key = key
        self._left = None
        self._right = None
        self._height = 1         # Altura inicial do nó (folha) é 1

    @property
    def key(self) -> int:
        return self._key

    @property
    def height(self) -> int:
        return self._height

    @property
    def left(self) -> Optional["AVLNode"]:
        return self._left

    @property
    def right(self) -> Optional["AVLNode"]:
        return self._right

    def __repr__(self):
        return f"AVLNode(key={self._key}, height={self._height})"

class AVLTree:
    """
    Árvore AVL: árvore binária de busca auto-balanceada.
    Após cada inserção, |altura(esq) - altura(dir)| <= 1 em todos os nós.
    Inserção em O(log n). Chaves duplicadas são ignoradas.
    """
    def __init__(self):
        self._root = None

    @property
    def root(self) -> Optional[AVLNode]:
        return self._root

    @property
    def height(self) -> int:
        return self._get_height(self._root)

    def reset(self):
        """Descarta todos os nós."""
        self._root = None

    def insert(self, key: int) -> InsertionReport:
        """Insere uma chave, rebalanceia e retorna as rotações aplicadas."""
        report = InsertionReport(key)
        self._root = self._insert_recursive(self._root, key, report)
        return report

    def _insert_recursive(self, node: Optional[AVLNode], key: int, report: InsertionReport) -> AVLNode:
        # 1. Inserção normal de BST
        if not node:
            return AVLNode(key)

        if key < node.key:
            node._left = self._insert_recursive(node._left, key, report)
        elif key > node.key:
            node._right = self._insert_recursive(node._right, key, report)
        else:
            # Chave duplicada: nada muda
            return node

        # 2. Atualizar altura do nó ancestral
        self._update_height(node)

        # 3. Fator de balanceamento
        balance = self.get_balance(node)

        # 4. Classificação pelo valor inserido

        # Caso 1 - Left-Left
        if balance > 1 and key < node._left.key:
            report.add(RotationDirection.RIGHT, node.key, ImbalanceCase.LEFT_LEFT)
            return self._rotate_right(node)

        # Caso 2 - Right-Right
        if balance < -1 and key > node._right.key:
            report.add(RotationDirection.LEFT, node.key, ImbalanceCase.RIGHT_RIGHT)
            return self._rotate_left(node)

        # Caso 3 - Left-Right
        if balance > 1 and key > node._left.key:
            report.add(RotationDirection.LEFT, node._left.key, ImbalanceCase.LEFT_RIGHT)
            report.add(RotationDirection.RIGHT, node.key, ImbalanceCase.LEFT_RIGHT)
            node._left = self._rotate_left(node._left)
            return self._rotate_right(node)

        # Caso 4 - Right-Left
        if balance < -1 and key < node._right.key:
            report.add(RotationDirection.RIGHT, node._right.key, ImbalanceCase.RIGHT_LEFT)
            report.add(RotationDirection.LEFT, node.key, ImbalanceCase.RIGHT_LEFT)
            node._right = self._rotate_right(node._right)
            return self._rotate_left(node)

        return node

    # --- Métodos Auxiliares e Rotações ---

    def _get_height(self, node: Optional[AVLNode]) -> int:
        if not node:
            return 0
        return node.height

    def _update_height(self, node: AVLNode):
        node._height = 1 + max(self._get_height(node.left), self._get_height(node.right))

    def get_balance(self, node: Optional[AVLNode]) -> int:
        """Fator de balanceamento: altura(esq) - altura(dir). Zero para nó vazio."""
        if not node:
            return 0
        return self._get_height(node.left) - self._get_height(node.right)

    balance_factor = get_balance

    def _rotate_left(self, x: AVLNode) -> AVLNode:
        """
        Rotação simples à esquerda.
        O filho direito (y) sobe; x vira filho esquerdo de y e herda a
        antiga subárvore esquerda de y.
        """
        assert x.right is not None, f"Rotação à esquerda sem filho direito em {x.key}"
        y = x._right
        T2 = y._left

        y._left = x
        x._right = T2

        # Filho antes do pai
        self._update_height(x)
        self._update_height(y)

        return y

    def _rotate_right(self, y: AVLNode) -> AVLNode:
        """
        Rotação simples à direita.
        Simétrica a _rotate_left.
        """
        assert y.left is not None, f"Rotação à direita sem filho esquerdo em {y.key}"
        x = y._left
        T2 = x._right

        x._right = y
        y._left = T2

        self._update_height(y)
        self._update_height(x)

        return x

    # --- Percursos ---

    def preorder(self) -> List[int]:
        keys: List[int] = []
        self._pre_order(self._root, keys)
        return keys

    def inorder(self) -> List[int]:
        """Percurso em ordem: sempre crescente."""
        keys: List[int] = []
        self._in_order(self._root, keys)
        return keys

    def postorder(self) -> List[int]:
        keys: List[int] = []
        self._post_order(self._root, keys)
        return keys

    def _pre_order(self, node, keys: List[int]):
        if node:
            keys.append(node.key)
            self._pre_order(node.left, keys)
            self._pre_order(node.right, keys)

    def _in_order(self, node, keys: List[int]):
        if node:
            self._in_order(node.left, keys)
            keys.append(node.key)
            self._in_order(node.right, keys)

    def _post_order(self, node, keys: List[int]):
        if node:
            self._post_order(node.left, keys)
            self._post_order(node.right, keys)
            keys.append(node.key)

    def __len__(self) -> int:
        return len(self.inorder())

    def __repr__(self):
        root_key = self._root.key if self._root else None
        return f"AVLTree(size={len(self)}, height={self.height}, root={root_key})"
