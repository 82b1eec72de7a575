"""
Letter names, accidentals and pitch classes

A pitch class (0-11) can be spelled in one or two standard ways. The
spellings are not computed from semitone offsets: standard tonal spelling
is a finite, irregular convention, so the names of each pitch class are
listed explicitly (flat-side spelling first where both exist)

    >>> PitchClass(1).names
    [PitchClassName(letter=LetterName.D, accidental=Accidental.Flat),
     PitchClassName(letter=LetterName.C, accidental=Accidental.Sharp)]
    >>> str(PitchClass(1))
    'D♭'
"""
from __future__ import annotations
import enum
from typing import NamedTuple


__all__ = (
    'LetterName',
    'Accidental',
    'PitchClassName',
    'PitchClass',
)


class LetterName(enum.Enum):
    C = 'C'
    D = 'D'
    E = 'E'
    F = 'F'
    G = 'G'
    A = 'A'
    B = 'B'

    def next(self) -> LetterName:
        """The letter following this one, B wraps to C"""
        idx = _letters.index(self)
        return _letters[(idx + 1) % len(_letters)]

    def previous(self) -> LetterName:
        """The letter preceding this one, C wraps to B"""
        idx = _letters.index(self)
        return _letters[(idx - 1) % len(_letters)]

    def __repr__(self):
        return f'LetterName.{self.name}'


_letters: tuple[LetterName, ...] = tuple(LetterName)


class Accidental(enum.Enum):
    Natural = '♮'
    Sharp = '♯'
    Flat = '♭'
    DoubleSharp = '𝄪'
    DoubleFlat = '𝄫'

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def printedSymbol(self) -> str:
        """
        The symbol as printed within a note name

        Naturals are not printed
        """
        return '' if self is Accidental.Natural else self.value

    def __repr__(self):
        return f'Accidental.{self.name}'


class PitchClassName(NamedTuple):
    letter: LetterName
    accidental: Accidental

    def __str__(self):
        return self.letter.value + self.accidental.value


def _n(letter: LetterName, accidental: Accidental) -> PitchClassName:
    return PitchClassName(letter, accidental)


_L = LetterName
_A = Accidental

_spellings: dict[int, tuple[PitchClassName, ...]] = {
    0:  (_n(_L.C, _A.Natural), _n(_L.B, _A.Sharp)),
    1:  (_n(_L.D, _A.Flat),    _n(_L.C, _A.Sharp)),
    2:  (_n(_L.D, _A.Natural),),
    3:  (_n(_L.E, _A.Flat),    _n(_L.D, _A.Sharp)),
    4:  (_n(_L.E, _A.Natural),),
    5:  (_n(_L.F, _A.Natural), _n(_L.E, _A.Sharp)),
    6:  (_n(_L.F, _A.Sharp),   _n(_L.G, _A.Flat)),
    7:  (_n(_L.G, _A.Natural),),
    8:  (_n(_L.A, _A.Flat),    _n(_L.G, _A.Sharp)),
    9:  (_n(_L.A, _A.Natural),),
    10: (_n(_L.B, _A.Flat),    _n(_L.A, _A.Sharp)),
    11: (_n(_L.B, _A.Natural), _n(_L.C, _A.Flat)),
}


class PitchClass:
    """
    One of the 12 pitch classes of equal temperament

    Args:
        index: the pitch class index, 0=C, 1=C#/Db, ..., 11=B. An index
            outside of the range 0-11 is not an error, but such a pitch
            class has no names
    """
    __slots__ = ('index',)

    def __init__(self, index: int):
        self.index = index

    def __setattr__(self, name, value):
        if hasattr(self, 'index'):
            raise AttributeError(f"{type(self).__name__} is immutable")
        super().__setattr__(name, value)

    @property
    def names(self) -> list[PitchClassName]:
        """The standard spellings of this pitch class, in order of preference"""
        return list(_spellings.get(self.index, ()))

    def hasName(self, name: tuple[LetterName, Accidental]) -> bool:
        """Is name one of the spellings of this pitch class?"""
        return any(name == candidate for candidate in _spellings.get(self.index, ()))

    @property
    def description(self) -> str:
        names = _spellings.get(self.index)
        return str(names[0]) if names else ''

    def __str__(self):
        return self.description

    def __repr__(self):
        return f'PitchClass({self.index})'

    def __eq__(self, other) -> bool:
        if not isinstance(other, PitchClass):
            return NotImplemented
        return self.index == other.index

    def __hash__(self) -> int:
        return hash(('PitchClass', self.index))
