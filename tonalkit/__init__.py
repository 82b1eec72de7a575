"""
tonalkit: pitch, pitch classes and note names in 12-tone equal temperament
"""
from .config import config
from .spelling import LetterName, Accidental, PitchClassName, PitchClass
from .pitch import Pitch, NoteNameTuple
from .tuning import Converter, mtof, ftom, set_reference_freq, get_reference_freq
