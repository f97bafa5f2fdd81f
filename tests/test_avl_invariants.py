"""
Propriedades da AVL verificadas com sequências aleatórias de inserção:
ordem BST, alturas em cache, balanceamento e contagem.
"""
import sys
import os
import math
import random

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.core.structures.avl_tree import AVLTree


def check_subtree(node, low=None, high=None):
    """
    Recalcula a altura por travessia e valida todos os invariantes.
    Retorna a altura real da subárvore.
    """
    if node is None:
        return 0

    assert low is None or node.value > low, f"Ordem BST violada em {node.value}"
    assert high is None or node.value < high, f"Ordem BST violada em {node.value}"

    left_height = check_subtree(node.left, low, node.value)
    right_height = check_subtree(node.right, node.value, high)
    real_height = 1 + max(left_height, right_height)

    assert node.height == real_height, f"Altura em cache errada no nó {node.value}"
    assert abs(left_height - right_height) <= 1, f"Nó {node.value} desbalanceado"
    return real_height


def _random_sequences(count=30, seed=42):
    rng = random.Random(seed)
    for _ in range(count):
        size = rng.randint(0, 300)
        yield [rng.randint(-500, 500) for _ in range(size)]


def test_invariants_hold_for_random_sequences():
    print("--- Invariantes AVL em sequências aleatórias ---")
    for values in _random_sequences():
        avl = AVLTree()
        for v in values:
            avl.insert_value(v)
            check_subtree(avl.root)

        assert avl.get_all_values() == sorted(set(values))
        assert avl.count_nodes() == len(set(values))
    print(">> SUCESSO: BST, alturas e balanceamento preservados.")


def test_balance_factor_within_limit():
    avl = AVLTree()
    for v in random.Random(7).sample(range(10000), 2000):
        avl.insert_value(v)

    for node, balance in avl.walk_pre_order():
        assert -1 <= balance <= 1
        assert balance == avl.get_balance_factor(node)


def test_sorted_inputs_stay_balanced():
    # Crescente e decrescente degenerariam uma BST comum
    for values in (list(range(1000)), list(range(1000, 0, -1))):
        avl = AVLTree()
        for v in values:
            avl.insert_value(v)
        check_subtree(avl.root)
        assert avl.get_tree_height() <= 1.45 * math.log2(len(values) + 2)


def test_height_bound_after_each_insert():
    avl = AVLTree()
    values = random.Random(3).sample(range(100000), 5000)
    for n, v in enumerate(values, start=1):
        avl.insert_value(v)
        assert avl.get_tree_height() <= 1.45 * math.log2(n + 2)


def test_duplicates_do_not_change_structure():
    rng = random.Random(11)
    for values in _random_sequences(count=10, seed=5):
        once = AVLTree()
        for v in values:
            once.insert_value(v)

        repeated = AVLTree()
        for v in values:
            repeated.insert_value(v)
            # Reinserir um valor já presente não pode mexer em nada
            repeated.insert_value(rng.choice(values[: values.index(v) + 1]))

        assert list(_flatten(once.root)) == list(_flatten(repeated.root))


def _flatten(node):
    stack = [node]
    while stack:
        current = stack.pop()
        if current is None:
            yield None
            continue
        yield (current.value, current.height)
        stack.append(current.right)
        stack.append(current.left)


if __name__ == "__main__":
    test_invariants_hold_for_random_sequences()
    test_sorted_inputs_stay_balanced()
    test_height_bound_after_each_insert()
