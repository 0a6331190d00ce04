"""Carregamento de configurações e normalização das opções de serialização."""

from __future__ import annotations

import logging
import os
from dataclasses import asdict, dataclass, field, fields, replace
from typing import Any, Mapping, Optional

from dotenv import load_dotenv

from .exceptions import FormSerializeConfigError
from .models import SerializeOptions

load_dotenv()

log = logging.getLogger(__name__)

OPTION_NAMES = frozenset(f.name for f in fields(SerializeOptions))
ENV_TRUE = frozenset({"1", "true", "t", "yes", "y", "on", "sim"})
ENV_FALSE = frozenset({"0", "false", "f", "no", "n", "off", "nao", "não"})


def _env_flag(name: str, default: bool = False) -> bool:
    """Lê uma flag booleana do ambiente; vazia ou ausente usa `default`."""
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    if raw in ENV_TRUE:
        return True
    if raw in ENV_FALSE:
        return False
    raise FormSerializeConfigError(
        f"Valor inválido para {name}: {raw!r}. Use true/false, sim/não ou 1/0."
    )


@dataclass(frozen=True)
class Settings:
    """Representa a configuração padrão de execução vinda do ambiente."""

    default_hash: bool = field(default_factory=lambda: _env_flag("FORM_SERIALIZE_HASH", default=True))
    disabled: bool = field(default_factory=lambda: _env_flag("FORM_SERIALIZE_DISABLED"))
    empty: bool = field(default_factory=lambda: _env_flag("FORM_SERIALIZE_EMPTY"))
    booleans: bool = field(default_factory=lambda: _env_flag("FORM_SERIALIZE_BOOLEANS"))
    debug_enabled: bool = field(default_factory=lambda: _env_flag("FORM_SERIALIZE_DEBUG"))

    def to_options(self) -> SerializeOptions:
        """Gera `SerializeOptions` equivalentes a esta configuração."""
        return SerializeOptions(
            hash=self.default_hash,
            disabled=self.disabled,
            empty=self.empty,
            booleans=self.booleans,
        )


def load_settings(overrides: Optional[Mapping[str, object]] = None) -> Settings:
    """
    Carrega configurações a partir de variáveis de ambiente com possíveis sobrescritas.

    Raises:
        FormSerializeConfigError: Se alguma variável booleana tiver valor inválido
            ou se uma sobrescrita não corresponder a um campo de `Settings`.
    """
    base = Settings()
    if not overrides:
        return base

    data = asdict(base)
    unknown = set(overrides) - set(data)
    if unknown:
        raise FormSerializeConfigError(f"Configurações desconhecidas: {', '.join(sorted(unknown))}")
    data.update(overrides)
    return Settings(**data)  # type: ignore[arg-type]


def configure_logging(settings: Settings) -> logging.Logger:
    """Liga a saída de logs no console; no modo debug o pacote registra cada campo ignorado."""
    logger = logging.getLogger("form_serialize")
    logger.setLevel(logging.DEBUG if settings.debug_enabled else logging.INFO)
    logging.basicConfig(format="%(asctime)s [%(levelname)s] %(name)s: %(message)s", datefmt="%H:%M:%S")
    return logger


def resolve_options(options: Any = None) -> SerializeOptions:
    """
    Normaliza o argumento `options` de `serialize` em um `SerializeOptions` completo.

    Aceita `None` ou um booleano (atalho para `{"hash": <valor>}`), um mapeamento com
    as chaves reconhecidas (as demais são ignoradas) ou uma instância de
    `SerializeOptions`. Quando um
    mapeamento/instância omite `hash`, o modo estruturado é ativado.

    Raises:
        FormSerializeConfigError: Se `serializer` não for chamável nem tiver `merge`.
    """
    if isinstance(options, SerializeOptions):
        resolved = options
    elif isinstance(options, Mapping):
        ignored = sorted(str(key) for key in options if key not in OPTION_NAMES)
        if ignored:
            log.debug("Opções desconhecidas ignoradas: %s", ", ".join(ignored))
        resolved = SerializeOptions(**{key: value for key, value in options.items() if key in OPTION_NAMES})
    else:
        return SerializeOptions(hash=bool(options))

    if resolved.hash is None:
        resolved = replace(resolved, hash=True)

    serializer = resolved.serializer
    if serializer is not None and not (callable(serializer) or hasattr(serializer, "merge")):
        raise FormSerializeConfigError(
            f"`serializer` deve ser uma função ou objeto com `merge`, recebido {type(serializer).__name__}."
        )
    return resolved
