# SPDX-License-Identifier: MIT

from typing import TypedDict


class Quote(TypedDict):
    quote: str
    author: str
