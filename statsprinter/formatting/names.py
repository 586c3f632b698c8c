"""
Имена ресурсов и модулей.

Data-URI ресурсы сокращаются: сохраняется префикс "data:<mime>," и
первые DATA_URI_CONTENT_LENGTH символов содержимого, далее "..".
"""

from __future__ import annotations

import re
from typing import Tuple

DATA_URI_CONTENT_LENGTH = 16

_DATA_URI_RE = re.compile(r"data:[^,]+,")
_MATCH_RESOURCE_RE = re.compile(r"([^!]+)!=!")
_LOADERS_RE = re.compile(r"(.*!)?([^!]*)")


def get_resource_name(resource: str) -> str:
    data_url = _DATA_URI_RE.match(resource)
    if not data_url:
        return resource

    limit = len(data_url.group(0)) + DATA_URI_CONTENT_LENGTH
    if len(resource) < limit:
        return resource
    return f"{resource[:min(len(resource) - 2, limit)]}.."


def get_module_name(name: str) -> Tuple[str, str]:
    """
    Делит имя модуля на префикс лоадеров и ресурс.

    "a-loader!b-loader!./src/x.js" -> ("a-loader!b-loader!", "./src/x.js")
    """
    match_resource = _MATCH_RESOURCE_RE.match(name)
    if match_resource:
        head = match_resource.group(0)
        name = head + get_resource_name(name[len(head):])

    parts = _LOADERS_RE.fullmatch(name)
    if not parts:
        return "", get_resource_name(name)
    return parts.group(1) or "", get_resource_name(parts.group(2))


__all__ = ["DATA_URI_CONTENT_LENGTH", "get_resource_name", "get_module_name"]
