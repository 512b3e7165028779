"""
NATO phonetic alphabet speller used by the ``nato`` command.
"""
from types import MappingProxyType
from typing import List, Mapping

NATO_ALPHABET: Mapping[str, str] = MappingProxyType({
    "A": "Alfa", "B": "Bravo", "C": "Charlie", "D": "Delta", "E": "Echo",
    "F": "Foxtrot", "G": "Golf", "H": "Hotel", "I": "India", "J": "Juliett",
    "K": "Kilo", "L": "Lima", "M": "Mike", "N": "November", "O": "Oscar",
    "P": "Papa", "Q": "Quebec", "R": "Romeo", "S": "Sierra", "T": "Tango",
    "U": "Uniform", "V": "Victor", "W": "Whiskey", "X": "X-ray", "Y": "Yankee",
    "Z": "Zulu",
    "0": "Zero", "1": "One", "2": "Two", "3": "Three", "4": "Four",
    "5": "Five", "6": "Six", "7": "Seven", "8": "Eight", "9": "Niner",
})

SPACE_WORD = "(space)"


def spell(text: str, table: Mapping[str, str] = NATO_ALPHABET) -> List[str]:
    """Spell ``text`` one code word per character. Unknown characters pass through."""
    words = []
    for char in text:
        if char.isspace():
            words.append(SPACE_WORD)
        else:
            words.append(table.get(char.upper(), char))
    return words
