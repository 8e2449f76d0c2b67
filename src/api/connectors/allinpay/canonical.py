"""String canônica do request (entrada da assinatura).

Equivale ao `JSON.stringify` do lado do gateway: chaves na ordem de
inserção, separadores compactos e caracteres não-ASCII preservados.
Qualquer desvio quebra a interoperabilidade da assinatura.
"""

from __future__ import annotations

import json
from typing import Any


def canonical_json(obj: Any) -> str:
    """Serializa `obj` de forma determinística, sem reordenar chaves.

    Raises:
        TypeError: Valor não serializável (erro de programação)
        ValueError: NaN/Infinity (sem representação JSON)
    """
    return json.dumps(obj, ensure_ascii=False, separators=(",", ":"), allow_nan=False)


def canonicalize(service: str, method: str, param: dict[str, Any]) -> str:
    """Monta a string canônica `{"service","method","param"}` do request."""
    return canonical_json({"service": service, "method": method, "param": param})
