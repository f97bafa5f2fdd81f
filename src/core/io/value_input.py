import re

# Inteiro em base 10 com sinal opcional. Nada de frações ou lixo no fim.
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class InvalidInputError(ValueError):
    """Texto que não representa um valor inteiro válido para a árvore."""
    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(f"Valor inválido: {raw!r}. Digite um número inteiro.")


def parse_value(text: str) -> int:
    """
    Converte o texto digitado pelo usuário em um inteiro.
    A validação fica fora da árvore AVL: a árvore só recebe valores já comparáveis.
    """
    if text is None:
        raise InvalidInputError("")

    cleaned = text.strip()
    if not _INTEGER_PATTERN.fullmatch(cleaned):
        raise InvalidInputError(text)

    return int(cleaned)
