import threading
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Tuple

from src.core.structures.avl_tree import AVLTree
from src.core.io.value_input import InvalidInputError, parse_value


@dataclass
class TreeStatus:
    """Resumo exibido no painel de status."""
    nodes: int
    height: int

    @property
    def is_empty(self) -> bool:
        return self.nodes == 0

    def __str__(self):
        return f"Nós: {self.nodes} | Altura: {self.height}"


class TreeSession:
    """
    Fachada de comandos sobre uma árvore AVL.
    A camada de apresentação recebe (ou cria) uma sessão e chama só estes métodos;
    não existe instância global da árvore.

    Todas as operações passam pelo mesmo lock, então a sessão pode ser
    compartilhada entre threads. A árvore em si não tem lock.
    """
    MAX_LOGS = 50

    def __init__(self, tree: Optional[AVLTree] = None, verbose: bool = True):
        self.tree = tree if tree is not None else AVLTree()
        self.verbose = verbose
        self.logs: List[str] = []
        self._lock = threading.Lock()
        self._log_lock = threading.Lock()

    def insert(self, value: Any) -> bool:
        """
        Insere um valor já validado.
        Retorna True se um nó novo foi criado, False se era duplicado.
        """
        with self._lock:
            created = not self.tree.contains(value)
            if created:
                self.tree.insert_value(value)
            height = self.tree.get_tree_height()

        if created:
            self.log(f"[AVL] Inserido {value} (altura {height})")
        else:
            self.log(f"[AVL] Valor {value} já existe, ignorado")
        return created

    def insert_text(self, text: str) -> bool:
        """Valida o texto digitado e insere. Texto inválido gera InvalidInputError."""
        try:
            value = parse_value(text)
        except InvalidInputError as e:
            self.log(f"[Entrada Erro] {e}")
            raise
        return self.insert(value)

    def clear(self, confirm: Optional[Callable[[], bool]] = None) -> bool:
        """
        Esvazia a árvore. Se confirm for informado e retornar False, nada muda.
        """
        if confirm is not None and not confirm():
            self.log("[AVL] Limpeza cancelada")
            return False

        with self._lock:
            self.tree.clear()

        self.log("[AVL] Árvore limpa")
        return True

    def status(self) -> TreeStatus:
        with self._lock:
            return TreeStatus(nodes=self.tree.count_nodes(), height=self.tree.get_tree_height())

    def annotated_nodes(self) -> List[Tuple[Any, int]]:
        """Pares (valor, fator de balanceamento) em pré-ordem, prontos para desenhar."""
        with self._lock:
            return [(node.value, balance) for node, balance in self.tree.walk_pre_order()]

    def values(self) -> List[Any]:
        with self._lock:
            return self.tree.get_all_values()

    def log(self, msg: str):
        if self.verbose:
            print(msg)
        with self._log_lock:
            self.logs.append(msg)
            # Mantém apenas os últimos MAX_LOGS na memória da UI
            if len(self.logs) > self.MAX_LOGS:
                self.logs.pop(0)
