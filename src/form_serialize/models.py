"""Modelos de dados utilizados para descrever campos de formulário e opções de serialização."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Union


class _Absent:
    """Marcador de "sem valor": chave inexistente na árvore ou lacuna em lista esparsa."""

    _instance: Optional["_Absent"] = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"

    def __copy__(self) -> "_Absent":
        return self

    def __deepcopy__(self, memo: Any) -> "_Absent":
        return self


ABSENT = _Absent()


@dataclass
class SelectOption:
    """Uma `option` de um `select`, com seu valor e estado de seleção."""

    value: str = ""
    selected: bool = False


@dataclass
class FieldDescriptor:
    """Descreve um controle de formulário do jeito que o DOM o expõe."""

    name: str
    type: str = "text"
    value: Optional[str] = None
    checked: bool = False
    indeterminate: bool = False
    disabled: bool = False
    options: List[SelectOption] = field(default_factory=list)
    node_name: Optional[str] = None

    def __post_init__(self) -> None:
        if self.node_name is None:
            self.node_name = node_name_for_type(self.type)


def node_name_for_type(field_type: Optional[str]) -> str:
    """Deduz a tag HTML mais provável para um tipo de controle."""
    tipo = (field_type or "").lower()
    if tipo.startswith("select"):
        return "select"
    if tipo == "textarea":
        return "textarea"
    return "input"


SerializerFunc = Callable[[Any, str, Any], Any]


@dataclass
class SerializeOptions:
    """Opções aceitas por `serialize`; `hash=None` equivale a modo estruturado."""

    hash: Optional[bool] = None
    serializer: Optional[Union["SerializerFunc", Any]] = None
    disabled: bool = False
    empty: bool = False
    booleans: bool = False

    @property
    def keep_empty(self) -> bool:
        """Indica se valores vazios devem ser serializados (`empty` ou `booleans`)."""
        return bool(self.empty or self.booleans)
