from typing import Optional
from dataclasses import dataclass

import lark

from src.chord_identifier.pitch_class import PitchClass, parse_pitch_class


@dataclass(frozen=True)
class RootToken:
    pitch_class: PitchClass
    degree: Optional[int] = None


@dataclass(frozen=True)
class QualityToken:
    symbol: str
    degree: Optional[int] = None


@dataclass(frozen=True)
class AddToken:
    degree: Optional[int] = None


class ChordSymbolTransformer(lark.Transformer):

    def NOTE(self, token):
        return parse_pitch_class(str(token))

    def QUALITY(self, token):
        return str(token)

    def DEGREE(self, token):
        return int(token)

    def root(self, children):
        return RootToken(*children)

    def quality(self, children):
        return QualityToken(*children)

    def add(self, children):
        return AddToken(*children)

    def symbol(self, children):
        return children
