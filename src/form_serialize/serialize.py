"""Ponto de entrada da serialização: campos de formulário -> string url-encoded ou árvore."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

from .config import resolve_options
from .fields import iter_events
from .serializers import pick_serializer

log = logging.getLogger(__name__)


def serialize(fields: Optional[Iterable[Any]], options: Any = None) -> Any:
    """
    Serializa os controles bem-sucedidos de um formulário.

    Args:
        fields: Sequência ordenada de descritores de campo (ver `FieldDescriptor`);
            qualquer objeto com `name`, `type`, `value`, `checked`, `indeterminate`,
            `disabled` e `options` é aceito. `None` equivale a um formulário vazio.
        options: `None`/booleano (atalho para `{"hash": valor}`), mapeamento ou
            `SerializeOptions` com as opções:
              - hash: se verdadeiro, devolve dicts/listas; senão string url-encoded.
              - serializer: função `(result, key, value) -> result` ou `Serializer`
                que substitui o padrão do modo.
              - disabled: serializa campos desabilitados.
              - empty: serializa campos vazios.
              - booleans: checkboxes viram `True`/`False`/`None`; implica `empty`.

    Returns:
        O acumulador final do serializer escolhido.
    """
    resolved = resolve_options(options)
    serializer = pick_serializer(resolved.serializer, bool(resolved.hash))

    result = serializer.initial()
    total = 0
    for key, value in iter_events(fields or [], resolved):
        result = serializer.merge(result, key, value)
        total += 1

    log.debug("Serialização concluída: %s pares (hash=%s)", total, resolved.hash)
    return result
