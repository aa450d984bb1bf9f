# exercise_menu/services/pig_latin_service.py
"""
Pig latin.

Words are handled by code point, so a word starting with a multi-byte
character moves that whole character.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..console import Console

VOWELS = frozenset("aeiou")

SAMPLE_SENTENCE = "first apple a ünicode Здравствуйте banana Orange"


def is_vowel(ch: str) -> bool:
    return ch.lower() in VOWELS


def pig_latin_word(word: str) -> str:
    """
    Convert one word.

      "a"      -> "ahay"     (single character)
      "apple"  -> "applehay" (vowel start)
      "first"  -> "irstfay"  (anything else moves to the end)
    """
    if len(word) == 1 or is_vowel(word[0]):
        return f"{word}hay"
    return f"{word[1:]}{word[0]}ay"


def pig_latin(sentence: str) -> str:
    return " ".join(pig_latin_word(word) for word in sentence.split())


@dataclass
class PigLatinService:
    """Console demo for pig_latin."""

    console: Console
    sentence: str = SAMPLE_SENTENCE

    def run(self) -> None:
        self.console.write(f"Original: {self.sentence}")
        self.console.write(f"Pig latin: {pig_latin(self.sentence)}")
