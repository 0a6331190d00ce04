"""Facade para serializar formulários HTML em strings url-encoded ou estruturas aninhadas."""

from .config import Settings, load_settings, resolve_options
from .dom import encontrar_formulario, extrair_campos, serializar_formulario
from .exceptions import FormNotFoundError, FormSerializeConfigError, FormSerializeError, FormSubmitError
from .models import ABSENT, FieldDescriptor, SelectOption, SerializeOptions
from .serialize import serialize
from .serializers import (
    FlatSerializer,
    Serializer,
    StructuredSerializer,
    hash_serializer,
    str_serialize,
)
from .storage import to_plain

__all__ = [
    "serialize",
    "hash_serializer",
    "str_serialize",
    "Serializer",
    "FlatSerializer",
    "StructuredSerializer",
    "FieldDescriptor",
    "SelectOption",
    "SerializeOptions",
    "ABSENT",
    "Settings",
    "load_settings",
    "resolve_options",
    "extrair_campos",
    "encontrar_formulario",
    "serializar_formulario",
    "to_plain",
    "FormSerializeError",
    "FormSerializeConfigError",
    "FormNotFoundError",
    "FormSubmitError",
]
