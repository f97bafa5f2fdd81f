"""
Validação empírica da altura logarítmica da AVL.
Após n inserções distintas a altura nunca passa de ~1.45 * log2(n + 2).
"""
import random
from dataclasses import dataclass
from typing import Iterable, List, Optional

import numpy as np

from src.core.structures.avl_tree import AVLTree

AVL_HEIGHT_FACTOR = 1.45


def avl_height_bound(n):
    """Limite superior de altura para n nós. Aceita escalar ou array."""
    return AVL_HEIGHT_FACTOR * np.log2(np.asarray(n, dtype=float) + 2)


@dataclass
class GrowthProfile:
    """Altura da árvore registrada após cada inserção."""
    sizes: np.ndarray
    heights: np.ndarray

    @property
    def bounds(self) -> np.ndarray:
        return avl_height_bound(self.sizes)

    def within_bound(self) -> bool:
        return bool(np.all(self.heights <= self.bounds))

    def worst_ratio(self) -> float:
        """Maior razão altura / limite observada (0.0 sem amostras)."""
        if self.sizes.size == 0:
            return 0.0
        return float(np.max(self.heights / self.bounds))


def measure_growth(values: Iterable, tree: Optional[AVLTree] = None) -> GrowthProfile:
    """
    Insere os valores um a um e registra (nós, altura) a cada passo.
    Duplicados entram na sequência mas não aumentam o número de nós.
    Os valores precisam ser hashable.
    """
    tree = tree if tree is not None else AVLTree()
    sizes: List[int] = []
    heights: List[int] = []

    # Conjunto auxiliar evita recontar a árvore inteira (O(n)) a cada passo
    seen = set(tree.get_all_values())
    for value in values:
        tree.insert_value(value)
        seen.add(value)
        sizes.append(len(seen))
        heights.append(tree.get_tree_height())

    return GrowthProfile(sizes=np.array(sizes, dtype=int), heights=np.array(heights, dtype=int))


def sequential_values(n: int) -> List[int]:
    """Chaves crescentes: o pior caso de uma BST sem balanceamento."""
    if n < 0:
        raise ValueError("O tamanho da carga de trabalho não pode ser negativo.")
    return list(range(n))


def shuffled_values(n: int, seed: Optional[int] = None) -> List[int]:
    values = sequential_values(n)
    random.Random(seed).shuffle(values)
    return values
