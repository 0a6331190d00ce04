"""Persistência do resultado da serialização em disco."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Union

from .models import ABSENT

log = logging.getLogger(__name__)


def to_plain(tree: Any) -> Any:
    """Copia a árvore trocando lacunas `ABSENT` por `None`, pronta para `json.dumps`."""
    if tree is ABSENT:
        return None
    if isinstance(tree, dict):
        return {key: to_plain(value) for key, value in tree.items()}
    if isinstance(tree, list):
        return [to_plain(item) for item in tree]
    return tree


def dumps_resultado(result: Any) -> str:
    """Texto do resultado: a própria string no modo plano, JSON indentado no estruturado."""
    if isinstance(result, str):
        return result
    return json.dumps(to_plain(result), ensure_ascii=False, indent=2)


def salvar_resultado(result: Any, caminho: Union[str, Path]) -> Path:
    """Grava o resultado da serialização no caminho informado e devolve o `Path` final."""
    path = Path(caminho).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dumps_resultado(result), encoding="utf-8")
    log.info("Resultado salvo em %s", path)
    return path
