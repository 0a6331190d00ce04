"""Estratégias que acumulam pares (chave, valor) em string url-encoded ou em árvore."""

from __future__ import annotations

import logging
import math
import re
from typing import Any, Callable, Dict, Optional
from urllib.parse import quote

from .keypath import has_brackets, parse_keys
from .models import ABSENT
from .tree import hash_assign

log = logging.getLogger(__name__)

RE_NEWLINE = re.compile(r"\r?\n")

# Caracteres que `encodeURIComponent` não escapa, além de letras, dígitos e `_.-~`.
URI_COMPONENT_SAFE = "!*'()"


def encode_uri_component(text: str) -> str:
    """Percent-encoding em UTF-8 equivalente ao `encodeURIComponent` dos navegadores."""
    return quote(text, safe=URI_COMPONENT_SAFE)


def format_scalar(value: Any) -> str:
    """Representa valores não textuais como o navegador faria ao concatená-los a uma string."""
    if value is None or value is ABSENT:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        return repr(value)
    return str(value)


def str_serialize(result: str, key: str, value: Any) -> str:
    """Acrescenta `key=value` à string url-encoded acumulada."""
    if isinstance(value, str):
        value = RE_NEWLINE.sub("\r\n", value)
        value = encode_uri_component(value)
        # espaços viram '+' em vez de '%20'
        value = value.replace("%20", "+")
    else:
        value = format_scalar(value)

    separator = "&" if result else ""
    return f"{result}{separator}{encode_uri_component(key)}={value}"


def hash_serializer(result: Dict[str, Any], key: str, value: Any) -> Dict[str, Any]:
    """Mescla o par na árvore estruturada, respeitando a notação de colchetes."""
    if has_brackets(key):
        hash_assign(result, parse_keys(key), value)
        return result

    # Nomes sem colchetes são atribuídos direto; se já houver valor (um radio e um
    # checkbox com o mesmo nome, por exemplo) o anterior vira lista.
    if key in result:
        existing = result[key]
        if not isinstance(existing, list):
            log.debug("Chave %r repetida; convertendo valor anterior em lista", key)
            existing = result[key] = [existing]
        existing.append(value)
    else:
        result[key] = value
    return result


class Serializer:
    """Interface de estratégia: valor inicial do acumulador e função de mescla."""

    def initial(self) -> Any:
        raise NotImplementedError

    def merge(self, result: Any, key: str, value: Any) -> Any:
        raise NotImplementedError

    def __call__(self, result: Any, key: str, value: Any) -> Any:
        return self.merge(result, key, value)


class FlatSerializer(Serializer):
    """Gera `application/x-www-form-urlencoded`."""

    def initial(self) -> str:
        return ""

    def merge(self, result: str, key: str, value: Any) -> str:
        return str_serialize(result, key, value)


class StructuredSerializer(Serializer):
    """Gera uma árvore de dicts e listas."""

    def initial(self) -> Dict[str, Any]:
        return {}

    def merge(self, result: Dict[str, Any], key: str, value: Any) -> Dict[str, Any]:
        return hash_serializer(result, key, value)


class CallableSerializer(Serializer):
    """Adapta uma função `(result, key, value) -> result` fornecida pelo chamador."""

    def __init__(self, func: Callable[[Any, str, Any], Any], hash_mode: bool = True) -> None:
        self.func = func
        self.hash_mode = hash_mode

    def initial(self) -> Any:
        return {} if self.hash_mode else ""

    def merge(self, result: Any, key: str, value: Any) -> Any:
        return self.func(result, key, value)


def pick_serializer(custom: Optional[Any], hash_mode: bool) -> Serializer:
    """Escolhe a estratégia: a do chamador, se houver, senão a padrão do modo."""
    if isinstance(custom, Serializer):
        return custom
    if custom is not None:
        if callable(custom):
            return CallableSerializer(custom, hash_mode=hash_mode)
        # objetos com `merge`, sem herdar de Serializer
        return CallableSerializer(custom.merge, hash_mode=hash_mode)
    return StructuredSerializer() if hash_mode else FlatSerializer()
