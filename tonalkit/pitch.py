"""
Pitch: a point in the continuous space of midinotes

A Pitch is defined by its midinote, which can be fractional. Only pitches
with an integral midinote have a pitch class and therefore a note name.

    >>> p = Pitch(61)
    >>> p.noteName
    'D♭4'
    >>> p.preferredName = (LetterName.C, Accidental.Sharp)
    >>> p.noteName
    'C♯4'
    >>> Pitch(61.5).noteName
    ''

Setting a preferred name which is not a spelling of the pitch class
is silently ignored
"""
from __future__ import annotations
import math
import re as _re

from .common import logger, isNumber, num_t
from .config import config
from .spelling import LetterName, Accidental, PitchClassName, PitchClass, _spellings
from . import tuning


__all__ = (
    'Pitch',
    'NoteNameTuple',
)


NoteNameTuple = tuple[LetterName, Accidental, int]


_cflat = PitchClassName(LetterName.C, Accidental.Flat)
_bsharp = PitchClassName(LetterName.B, Accidental.Sharp)


_accidentalAliases = {
    '': Accidental.Natural,
    '♮': Accidental.Natural,
    '♯': Accidental.Sharp,
    '#': Accidental.Sharp,
    '♭': Accidental.Flat,
    'b': Accidental.Flat,
    '𝄪': Accidental.DoubleSharp,
    '##': Accidental.DoubleSharp,
    'x': Accidental.DoubleSharp,
    '𝄫': Accidental.DoubleFlat,
    'bb': Accidental.DoubleFlat,
}

_notenameRegex = _re.compile(r"(?P<letter>[A-Ga-g])(?P<acc>♮|♯|♭|𝄪|𝄫|##|bb|#|b|x)?(?P<oct>-?\d+)")

_nameToIndex: dict[PitchClassName, int] = {name: idx
                                           for idx, names in _spellings.items()
                                           for name in names}


def applyOctaveNumber(octaveNumber: int, name: tuple[LetterName, Accidental]
                      ) -> NoteNameTuple:
    """
    Apply an octave number to a pitch class name

    The octave of a C♭ is one higher than the octave of the B it sounds
    as, the octave of a B♯ is one lower than the octave of its C

    Args:
        octaveNumber: the octave number as derived from the midinote
        name: the spelling of the pitch class

    Returns:
        a tuple (letter, accidental, octave)
    """
    if name == _cflat:
        octaveNumber += 1
    elif name == _bsharp:
        octaveNumber -= 1
    return (name[0], name[1], octaveNumber)


class Pitch:
    """
    A pitch in 12-tone equal temperament

    Args:
        midiNumber: the midinote (60=C4, 69=A4), can be fractional
        frequency: if given instead of a midinote, the pitch is created
            from this frequency, using the global reference freq.
    """
    __slots__ = ('_midi', '_preferredName')

    def __init__(self, midiNumber: num_t | None = None, frequency: num_t | None = None):
        if midiNumber is None:
            if frequency is None:
                raise TypeError("Either midiNumber or frequency must be given")
            midiNumber = tuning.ftom(frequency)
        elif frequency is not None:
            raise TypeError("midiNumber and frequency are mutually exclusive, "
                            f"got {midiNumber=}, {frequency=}")
        self._midi: float = midiNumber
        self._preferredName: PitchClassName | None = None

    @classmethod
    def fromFrequency(cls, freq: num_t) -> Pitch:
        """Create a Pitch from a frequency in Hz"""
        return cls(tuning.ftom(freq))

    @classmethod
    def fromNoteName(cls, notename: str) -> Pitch:
        """
        Create a Pitch from a notename

        The spelling is kept as the preferred name of the pitch, so that
        ``Pitch.fromNoteName(s).noteName == s`` for any standard spelling

        Both unicode and ascii accidentals are accepted::

            C4, C♯4, C#4, Db-1, B♯3, Cb4

        Args:
            notename: the notename to parse

        Returns:
            the corresponding Pitch

        Raises:
            ValueError if notename can't be parsed or is not one of
            the standard spellings (see :class:`PitchClass`)
        """
        m = _notenameRegex.fullmatch(notename.strip())
        if not m:
            raise ValueError(f"Could not parse notename '{notename}'")
        letter = LetterName(m.group('letter').upper())
        accidental = _accidentalAliases[m.group('acc') or '']
        name = PitchClassName(letter, accidental)
        index = _nameToIndex.get(name)
        if index is None:
            raise ValueError(f"{name} is not a standard spelling (notename: '{notename}')")
        # invert the octave adjustment of B♯ / C♭
        _, _, shift = applyOctaveNumber(0, name)
        octave = int(m.group('oct')) - shift
        pitch = cls((octave + 1) * 12 + index)
        pitch.preferredName = name
        return pitch

    @property
    def midiNumber(self) -> float:
        return self._midi

    @property
    def frequency(self) -> float:
        return tuning.mtof(self._midi)

    @property
    def pitchClass(self) -> PitchClass | None:
        """
        The pitch class of this pitch, or None if the midinote is fractional
        """
        midi = self._midi
        if not math.isfinite(midi) or midi != math.floor(midi):
            return None
        return PitchClass(int(midi) % 12)

    @property
    def octaveNumber(self) -> int | None:
        """
        The octave in scientific pitch notation (60 -> 4)

        None if the midinote is not finite
        """
        if not math.isfinite(self._midi):
            return None
        return math.floor((self._midi - 12) / 12)

    @property
    def preferredName(self) -> PitchClassName | None:
        """
        The preferred spelling of this pitch

        Can only be set to one of the names of its pitch class, any other
        value is ignored
        """
        return self._preferredName

    @preferredName.setter
    def preferredName(self, name: tuple[LetterName, Accidental] | None) -> None:
        if name is None:
            return
        pitchClass = self.pitchClass
        if pitchClass is None or not pitchClass.hasName(name):
            logger.debug("%s is not a valid name for midinote %s, ignoring", name, self._midi)
            return
        self._preferredName = PitchClassName(*name)

    @property
    def spellings(self) -> list[NoteNameTuple]:
        """
        All the ways this pitch can be spelled, as (letter, accidental, octave)
        """
        pitchClass = self.pitchClass
        if pitchClass is None:
            return []
        octave = self.octaveNumber
        return [applyOctaveNumber(octave, name) for name in pitchClass.names]

    @property
    def noteNameTuple(self) -> NoteNameTuple | None:
        pitchClass = self.pitchClass
        if pitchClass is None:
            return None
        if self._preferredName is not None:
            return applyOctaveNumber(self.octaveNumber, self._preferredName)
        names = pitchClass.names
        if not names:
            return None
        return applyOctaveNumber(self.octaveNumber, names[0])

    @property
    def noteName(self) -> str:
        nametuple = self.noteNameTuple
        if nametuple is None:
            return ''
        letter, accidental, octave = nametuple
        return f"{letter.value}{accidental.printedSymbol}{octave}"

    @property
    def description(self) -> str:
        return f"{self.noteName}: {self.frequency}Hz"

    def __str__(self):
        return self.description

    def __repr__(self):
        name = self.noteName or f"{self._midi:g}"
        if config['reprShowFreq']:
            return f"<Pitch {name} {self.frequency:.1f}Hz>"
        return f"<Pitch {name}>"

    def __float__(self) -> float:
        return float(self._midi)

    def __eq__(self, other) -> bool:
        if isinstance(other, Pitch):
            return self._midi == other._midi
        if isNumber(other):
            return self._midi == other
        return NotImplemented

    def __lt__(self, other) -> bool:
        if isinstance(other, Pitch):
            return self._midi < other._midi
        if isNumber(other):
            return self._midi < other
        return NotImplemented

    def __le__(self, other) -> bool:
        if isinstance(other, Pitch):
            return self._midi <= other._midi
        if isNumber(other):
            return self._midi <= other
        return NotImplemented

    def __gt__(self, other) -> bool:
        if isinstance(other, Pitch):
            return self._midi > other._midi
        if isNumber(other):
            return self._midi > other
        return NotImplemented

    def __ge__(self, other) -> bool:
        if isinstance(other, Pitch):
            return self._midi >= other._midi
        if isNumber(other):
            return self._midi >= other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._midi)
