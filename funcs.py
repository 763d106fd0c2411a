# funcs.py
"""Helper functions available inside templates.

Every helper is registered both as a filter (`labels | asDict`) and as a
global (`hasKey(labels, "app")`), value first in both forms.
"""

from __future__ import annotations

import base64
import json
from collections.abc import Mapping
from typing import Any, Callable, Dict

import yaml
from jinja2 import Undefined
from jinja2.exceptions import TemplateRuntimeError


def deref(value: Any) -> Any:
    """Nil-checking identity.

    Ingresses are bound as plain dicts, so an optional field is either the
    value itself or missing. A present value is returned as is; a missing one
    (None or undefined) fails the render instead of producing an empty value.
    """
    if value is None or isinstance(value, Undefined):
        raise TemplateRuntimeError("deref: value is nil")
    return value


def as_dict(mss: Mapping | None) -> Dict[str, Any]:
    """Copy a str->str mapping (labels, annotations) into a plain dict."""
    if mss is None:
        return {}
    if not isinstance(mss, Mapping):
        raise TemplateRuntimeError(f"asDict: expected a mapping, got {type(mss).__name__}")
    return {k: v for k, v in mss.items()}


def has_key(d: Mapping, key: str) -> bool:
    return key in d


def keys(d: Mapping) -> list:
    return list(d.keys())


def values(d: Mapping) -> list:
    return list(d.values())


def to_yaml(v: Any) -> str:
    return yaml.safe_dump(v, default_flow_style=False, sort_keys=False).rstrip("\n")


def to_json(v: Any) -> str:
    # to_dict() leaves timestamps as datetime
    return json.dumps(v, default=str)


def b64enc(s: Any) -> str:
    return base64.b64encode(str(s).encode()).decode()


def b64dec(s: Any) -> str:
    return base64.b64decode(str(s).encode()).decode()


def quote(*args: Any) -> str:
    return " ".join(json.dumps(str(a)) for a in args if a is not None)


def squote(*args: Any) -> str:
    return " ".join(f"'{a}'" for a in args if a is not None)


def nindent(s: Any, width: int) -> str:
    pad = " " * width
    return "\n" + pad + str(s).replace("\n", "\n" + pad)


def trim_prefix(s: str, prefix: str) -> str:
    return s[len(prefix):] if prefix and s.startswith(prefix) else s


def trim_suffix(s: str, suffix: str) -> str:
    return s[: -len(suffix)] if suffix and s.endswith(suffix) else s


def has_prefix(s: str, prefix: str) -> bool:
    return s.startswith(prefix)


def has_suffix(s: str, suffix: str) -> bool:
    return s.endswith(suffix)


def contains(s: str, sub: str) -> bool:
    return sub in s


def template_funcs() -> Dict[str, Callable[..., Any]]:
    return {
        "deref": deref,
        "asDict": as_dict,
        "hasKey": has_key,
        "keys": keys,
        "values": values,
        "toYaml": to_yaml,
        "toJson": to_json,
        "b64enc": b64enc,
        "b64dec": b64dec,
        "quote": quote,
        "squote": squote,
        "nindent": nindent,
        "trimPrefix": trim_prefix,
        "trimSuffix": trim_suffix,
        "hasPrefix": has_prefix,
        "hasSuffix": has_suffix,
        "contains": contains,
    }
