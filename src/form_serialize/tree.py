"""Atribuição recursiva de valores em uma árvore de dicts/listas a partir de um caminho de chaves."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from .keypath import ARRAY_MARKER, as_index, bracket_content
from .models import ABSENT

log = logging.getLogger(__name__)

# Chave reservada que guarda valores anexados com `[]` em um nó que não é lista.
VALUES_KEY = "_values"


def _as_mapping(current: Any) -> Dict[str, Any]:
    """Garante um dict no nó atual sem descartar o que já estava lá."""
    if current is ABSENT:
        return {}
    if isinstance(current, dict):
        return current
    log.debug("Colisão de nome/tipo: %r movido para %s", current, VALUES_KEY)
    if isinstance(current, list):
        return {VALUES_KEY: current}
    return {VALUES_KEY: [current]}


def _values_list(mapping: Dict[str, Any]) -> List[Any]:
    values = mapping.get(VALUES_KEY, ABSENT)
    if values is ABSENT:
        values = mapping[VALUES_KEY] = []
    elif not isinstance(values, list):
        values = mapping[VALUES_KEY] = [values]
    return values


def hash_assign(current: Any, keys: List[str], value: Any) -> Any:
    """
    Mescla `value` em `current` seguindo `keys` e devolve o nó resultante.

    `keys` é consumida da esquerda para a direita (um segmento por nível) e fica
    vazia ao final. `current` é `ABSENT` quando ainda não há nada naquela posição.
    Dicts e listas existentes são alterados no lugar.
    """
    if not keys:
        return value

    key = keys.pop(0)

    if key == ARRAY_MARKER:
        if current is ABSENT:
            current = []
        if isinstance(current, list):
            current.append(hash_assign(ABSENT, keys, value))
            return current
        # Nomes como `a[x]` seguido de `a[]`: o nó já é um objeto.
        current = _as_mapping(current)
        _values_list(current).append(hash_assign(ABSENT, keys, value))
        return current

    content = bracket_content(key)
    if content is None:
        name = key
    else:
        index = as_index(content)
        if index is None:
            name = content
        else:
            if current is ABSENT:
                current = []
            if isinstance(current, list):
                if len(current) <= index:
                    current.extend([ABSENT] * (index + 1 - len(current)))
                current[index] = hash_assign(current[index], keys, value)
                return current
            name = str(index)

    mapping = _as_mapping(current)
    mapping[name] = hash_assign(mapping.get(name, ABSENT), keys, value)
    return mapping
