from typing import Any, Generic, Iterator, List, Optional, Protocol, Tuple, TypeVar


class SupportsLessThan(Protocol):
    def __lt__(self, other: Any) -> bool: ...


T = TypeVar('T', bound=SupportsLessThan)


class AVLNode(Generic[T]):
    """
    Nó interno da Árvore AVL.
    O valor é ao mesmo tempo a chave de ordenação e o dado armazenado.
    """
    def __init__(self, value: T):
        self.value = value
        self.left: Optional['AVLNode[T]'] = None
        self.right: Optional['AVLNode[T]'] = None
        self.height = 1         # Folha tem altura 1

    def __repr__(self):
        return f"AVLNode({self.value!r}, h={self.height})"


class AVLTree(Generic[T]):
    """
    Árvore AVL com rebalanceamento automático na inserção.
    Garante altura O(log n): em todo nó |altura(esq) - altura(dir)| <= 1.

    Não é thread-safe: quem compartilha a árvore entre threads deve
    serializar insert_value/clear e as travessias (ver TreeSession).
    """
    def __init__(self):
        self._root: Optional[AVLNode[T]] = None

    @property
    def root(self) -> Optional[AVLNode[T]]:
        """Raiz da árvore (somente leitura) ou None se vazia."""
        return self._root

    # --- Altura e Fator de Balanceamento ---

    def get_height(self, node: Optional[AVLNode[T]]) -> int:
        if not node:
            return 0
        return node.height

    def get_balance_factor(self, node: Optional[AVLNode[T]]) -> int:
        """Positivo = pesado à esquerda, negativo = pesado à direita."""
        if not node:
            return 0
        return self.get_height(node.left) - self.get_height(node.right)

    def update_height(self, node: Optional[AVLNode[T]]):
        if node:
            node.height = 1 + max(self.get_height(node.left), self.get_height(node.right))

    # --- Rotações ---

    def rotate_right(self, y: AVLNode[T]) -> AVLNode[T]:
        """
        Rotação simples à direita (caso Left-Left).
        O filho esquerdo x sobe; a subárvore direita de x passa a ser a esquerda de y.
        """
        x = y.left
        t2 = x.right

        x.right = y
        y.left = t2

        # y agora é filho de x: atualizar y primeiro
        self.update_height(y)
        self.update_height(x)

        return x

    def rotate_left(self, x: AVLNode[T]) -> AVLNode[T]:
        """
        Rotação simples à esquerda (caso Right-Right).
        Espelho de rotate_right.
        """
        y = x.right
        t2 = y.left

        y.left = x
        x.right = t2

        self.update_height(x)
        self.update_height(y)

        return y

    # --- Inserção ---

    def insert(self, node: Optional[AVLNode[T]], value: T) -> AVLNode[T]:
        """
        Insere recursivamente em node e devolve a nova raiz da subárvore.
        Valores duplicados são ignorados.
        """
        # 1. Inserção normal de BST
        if not node:
            return AVLNode(value)

        if value < node.value:
            node.left = self.insert(node.left, value)
        elif value > node.value:
            node.right = self.insert(node.right, value)
        else:
            return node

        # 2. Atualizar altura do ancestral
        self.update_height(node)

        # 3. Verificar desequilíbrio
        balance = self.get_balance_factor(node)

        # Left-Left
        if balance > 1 and value < node.left.value:
            return self.rotate_right(node)

        # Right-Right
        if balance < -1 and value > node.right.value:
            return self.rotate_left(node)

        # Left-Right
        if balance > 1 and value > node.left.value:
            node.left = self.rotate_left(node.left)
            return self.rotate_right(node)

        # Right-Left
        if balance < -1 and value < node.right.value:
            node.right = self.rotate_right(node.right)
            return self.rotate_left(node)

        return node

    def insert_value(self, value: T):
        """Insere um valor e rebalanceia a árvore automaticamente."""
        self._root = self.insert(self._root, value)

    def clear(self):
        """Descarta todos os nós de uma vez."""
        self._root = None

    def contains(self, value: T) -> bool:
        """Busca iterativa da raiz até a folha, O(log n). Não altera a árvore."""
        current = self._root
        while current:
            if value < current.value:
                current = current.left
            elif value > current.value:
                current = current.right
            else:
                return True
        return False

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    # --- Consultas de diagnóstico ---

    def count_subtree(self, node: Optional[AVLNode[T]]) -> int:
        if not node:
            return 0
        return 1 + self.count_subtree(node.left) + self.count_subtree(node.right)

    def count_nodes(self) -> int:
        """Total de nós, O(n)."""
        return self.count_subtree(self._root)

    def get_tree_height(self) -> int:
        """Altura da árvore, O(1) graças à altura em cache."""
        return self.get_height(self._root)

    def is_empty(self) -> bool:
        return self._root is None

    def get_all_values(self) -> List[T]:
        """Retorna todos os valores em ordem crescente (in-order)."""
        values: List[T] = []
        self._in_order(self._root, values)
        return values

    def _in_order(self, node: Optional[AVLNode[T]], values: List[T]):
        if node:
            self._in_order(node.left, values)
            values.append(node.value)
            self._in_order(node.right, values)

    def walk_pre_order(self) -> Iterator[Tuple[AVLNode[T], int]]:
        """
        Percorre a árvore em pré-ordem (pai, esquerda, direita) gerando
        pares (nó, fator de balanceamento) para a camada de apresentação.
        """
        stack: List[AVLNode[T]] = [self._root] if self._root else []
        while stack:
            node = stack.pop()
            yield node, self.get_balance_factor(node)
            if node.right:
                stack.append(node.right)
            if node.left:
                stack.append(node.left)

    def __len__(self) -> int:
        return self.count_nodes()

    def __repr__(self):
        return f"AVLTree(nodes={self.count_nodes()}, height={self.get_tree_height()})"
