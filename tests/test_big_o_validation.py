"""
Validação empírica do comportamento logarítmico da AVL:
- Altura: O(log n), limitada por 1.44 * log2(n + 2)
- Inserção: O(log n) por chave
"""
import sys
import os
import time
import math
import random
import numpy as np

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.core.structures.avl_tree import AVLTree

SIZES = [100, 500, 1000, 2000, 5000]

def test_avl_height_is_logarithmic():
    """Altura da árvore cresce como log(n), mesmo com entrada ordenada."""
    print("--- Teste: Altura da AVL ---")

    heights = []
    for size in SIZES:
        avl = AVLTree()
        for i in range(size):
            avl.insert(i)
        heights.append(avl.height)

        bound = 1.44 * math.log2(size + 2)
        print(f"  n={size:5d}: altura={avl.height:2d} (limite {bound:.2f})")
        assert avl.height <= bound, f"Altura {avl.height} acima do limite AVL para n={size}"

    # A altura deve acompanhar log2(n) quase linearmente
    correlation = np.corrcoef(np.log2(SIZES), heights)[0, 1]
    print(f"  Correlação altura x log2(n): {correlation:.3f}")
    assert correlation > 0.95
    print("  >> SUCESSO: Altura é O(log n)")

def test_avl_random_height_bound():
    rng = random.Random(11)
    for size in SIZES:
        avl = AVLTree()
        for key in rng.sample(range(size * 10), size):
            avl.insert(key)
        assert avl.height <= 1.44 * math.log2(size + 2)

def test_avl_insertion_complexity():
    """Tempo médio por inserção não deve crescer linearmente com n."""
    print("--- Teste: Complexidade de Inserção AVL ---")

    per_insert = []
    for size in SIZES:
        avl = AVLTree()
        start = time.perf_counter()
        for i in range(size):
            avl.insert(i)
        elapsed = time.perf_counter() - start
        per_insert.append(elapsed / size)
        print(f"  n={size:5d}: {elapsed*1000:.2f} ms")

    # n cresce 50x; um custo linear por inserção cresceria ~50x
    growth = np.mean(per_insert[-2:]) / np.mean(per_insert[:2])
    print(f"  Crescimento do custo por inserção: {growth:.2f}x")
    assert growth < 15, "Custo por inserção cresce rápido demais para O(log n)"

if __name__ == "__main__":
    print("=" * 60)
    print("VALIDAÇÃO DE COMPLEXIDADE BIG-O")
    print("=" * 60)
    test_avl_height_is_logarithmic()
    test_avl_insertion_complexity()
