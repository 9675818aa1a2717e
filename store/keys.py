"""
Key naming for the Zenshin key-value store.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import hashlib


def _slug(value: str) -> str:
    # API tokens never appear in key names; use strong stable hashing.
    return hashlib.sha256(value.encode()).hexdigest()[:32]


def api_key() -> str:
    return "zs:api-key"


def progressions(token: str) -> str:
    return f"zs:progressions:{_slug(token)}"
