import hashlib
from collections.abc import Mapping
from typing import Any

# Never part of the signed string.
SIGNING_SKIP = frozenset({"format", "callback", "api_sig"})


def md5_hex(s: str) -> str:
    return hashlib.md5(s.encode("utf-8")).hexdigest()


def api_signature(params: Mapping[str, Any], api_secret: str) -> str:
    """Build a Last.fm ``api_sig``.

    Parameters (minus ``format``/``callback``) are sorted by key, each key is
    followed by its value, the shared secret is appended and the whole string
    is MD5-hashed.
    """
    items = sorted((k, str(v)) for k, v in params.items() if k not in SIGNING_SKIP)
    sig_str = "".join(k + v for k, v in items) + api_secret
    return md5_hex(sig_str)
