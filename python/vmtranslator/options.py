from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class StaticPolicy(Enum):
    SYMBOLS = "symbols"   # static i of Foo.vm -> @Foo.i
    REJECT = "reject"     # push/pop static raise NotImplementedCommand


@dataclass(frozen=True)
class TranslatorOptions:
    static_policy: StaticPolicy = StaticPolicy.SYMBOLS
