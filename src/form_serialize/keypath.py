"""Interpretação de nomes de campo em notação de colchetes (`a[b][0]`, `a[]`)."""

from __future__ import annotations

import re
from typing import List, Optional

# Grupos `[...]` sem colchetes aninhados.
RE_BRACKETS = re.compile(r"\[[^\[\]]*\]")
RE_PREFIX = re.compile(r"^[^\[\]]*")
RE_BETWEEN = re.compile(r"^\[(.+?)\]$")
RE_NUMBER = re.compile(r"^[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?$")

ARRAY_MARKER = "[]"


def has_brackets(key: str) -> bool:
    """Indica se o nome usa notação de colchetes."""
    return RE_BRACKETS.search(key) is not None


def parse_keys(key: str) -> List[str]:
    """
    Quebra um nome de campo em segmentos de caminho.

    O trecho antes do primeiro colchete (quando não vazio) vira o segmento raiz,
    sem colchetes; cada grupo `[...]` seguinte vira um segmento com os colchetes
    preservados, inclusive o marcador vazio `[]`.

    >>> parse_keys("a[b][0][]")
    ['a', '[b]', '[0]', '[]']
    """
    keys: List[str] = []
    prefix = RE_PREFIX.match(key)
    if prefix and prefix.group(0):
        keys.append(prefix.group(0))
    keys.extend(RE_BRACKETS.findall(key))
    return keys


def bracket_content(segment: str) -> Optional[str]:
    """Retorna o conteúdo entre colchetes, ou `None` para nomes simples e para `[]`."""
    match = RE_BETWEEN.match(segment)
    if not match:
        return None
    return match.group(1)


def as_index(content: str) -> Optional[int]:
    """
    Converte o conteúdo de um segmento em índice de lista.

    O conteúdo inteiro precisa ser um número (`2`, `+1`, `1.0`, `1e2`); números
    negativos ou fracionários continuam sendo nomes de atributo.
    """
    text = content.strip()
    if not RE_NUMBER.match(text):
        return None
    number = float(text)
    if number < 0 or not number.is_integer():
        return None
    return int(number)
