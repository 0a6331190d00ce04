"""Filtragem de controles bem-sucedidos e extração de seus valores efetivos.

Segue o modelo de "successful controls" do HTML 4.01
(http://www.w3.org/TR/html401/interact/forms.html#h-17.13.2).
"""

from __future__ import annotations

import logging
import math
import re
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from .keypath import ARRAY_MARKER
from .models import SerializeOptions, node_name_for_type

log = logging.getLogger(__name__)

# Tipos que indicam ação de envio e nunca são controles bem-sucedidos.
RE_SUBMITTER = re.compile(r"^(?:submit|button|image|reset|file)$", re.I)

# Tags que podem ser controles bem-sucedidos.
RE_SUCCESS_CONTROLS = re.compile(r"^(?:input|select|textarea|keygen)", re.I)

RE_INTEGER = re.compile(r"^[+-]?[0-9]+$")
RE_DECIMAL = re.compile(r"^[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?$")
RE_INFINITY = re.compile(r"^([+-]?)Infinity$")

Event = Tuple[str, Any]
RadioStore = Dict[str, bool]


def to_number(raw: Any) -> Union[int, float]:
    """Converte o valor bruto de um `input type=number` à maneira do `Number()` do JavaScript."""
    if isinstance(raw, bool):
        return int(raw)
    if isinstance(raw, (int, float)):
        return raw
    text = str(raw).strip()
    if not text:
        return 0
    if RE_INTEGER.match(text):
        return int(text)
    if RE_DECIMAL.match(text):
        return float(text)
    infinity = RE_INFINITY.match(text)
    if infinity:
        return -math.inf if infinity.group(1) == "-" else math.inf
    return math.nan


def is_falsy(value: Any) -> bool:
    """Falsidade no sentido do JavaScript: `None`, `False`, `''`, `0` e `NaN`."""
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (int, float)):
        return value == 0 or (isinstance(value, float) and math.isnan(value))
    return False


def _attr(field: Any, name: str, default: Any = None) -> Any:
    return getattr(field, name, default)


def is_successful(field: Any, options: SerializeOptions) -> bool:
    """Decide se o campo pode contribuir com valores para a serialização."""
    name = _attr(field, "name")
    if not name:
        return False
    if _attr(field, "disabled", False) and not options.disabled:
        log.debug("Campo %r ignorado: desabilitado", name)
        return False

    field_type = _attr(field, "type") or ""
    node_name = _attr(field, "node_name") or node_name_for_type(field_type)
    if not RE_SUCCESS_CONTROLS.match(node_name) or RE_SUBMITTER.match(field_type):
        log.debug("Campo %r ignorado: %s/%s não é controle bem-sucedido", name, node_name, field_type)
        return False
    return True


def _select_value(field: Any) -> Optional[str]:
    """Valor do `select` em si: o informado no descritor ou o da primeira opção selecionada."""
    value = _attr(field, "value")
    if value is not None:
        return value
    for option in _attr(field, "options", None) or []:
        if _attr(option, "selected", False):
            return _attr(option, "value", "") or ""
    return ""


def _select_multiple_events(field: Any, options: SerializeOptions) -> List[Event]:
    key: str = field.name
    if not options.keep_empty and is_falsy(_select_value(field)):
        return []

    # "foo" e "foo[]" devem virar listas no modo estruturado.
    target = key
    if options.hash and not key.endswith(ARRAY_MARKER):
        target = key + ARRAY_MARKER

    events: List[Event] = []
    for option in _attr(field, "options", None) or []:
        option_value = _attr(option, "value", "") or ""
        allowed_empty = options.keep_empty and not option_value
        if _attr(option, "selected", False) and (option_value or allowed_empty):
            events.append((target, option_value))

    if not events and options.keep_empty:
        events.append((key, ""))
    return events


def extract_events(field: Any, options: SerializeOptions, radio_store: RadioStore) -> List[Event]:
    """
    Calcula os pares (chave, valor) que um campo produz.

    Retorna lista vazia para campos ignorados; `select-multiple` pode gerar vários
    pares. Radios atualizam `radio_store` e só geram par quando marcados.
    """
    if not is_successful(field, options):
        return []

    key: str = field.name
    field_type = (_attr(field, "type") or "").lower()
    value = _attr(field, "value")

    if field_type == "number":
        if value is not None:
            value = to_number(value)

    elif field_type == "checkbox":
        checked = bool(_attr(field, "checked", False))
        if options.booleans:
            value = None if _attr(field, "indeterminate", False) else checked
        elif not checked:
            value = ""

    elif field_type == "radio":
        checked = bool(_attr(field, "checked", False))
        if checked:
            radio_store[key] = True
        elif not radio_store.get(key):
            radio_store[key] = False
        if not checked:
            return []

    elif field_type == "select-multiple":
        return _select_multiple_events(field, options)

    if not options.keep_empty and is_falsy(value):
        return []
    return [(key, value)]


def trailing_radio_events(radio_store: RadioStore, options: SerializeOptions) -> List[Event]:
    """Pares vazios para grupos de radio sem nenhuma opção marcada."""
    if not options.keep_empty:
        return []
    return [(key, "") for key, checked in radio_store.items() if not checked]


def iter_events(fields: Iterable[Any], options: SerializeOptions) -> Iterable[Event]:
    """Percorre os campos em ordem e gera todos os pares, incluindo os radios vazios ao final."""
    radio_store: RadioStore = {}
    for field in fields:
        yield from extract_events(field, options, radio_store)
    yield from trailing_radio_events(radio_store, options)
