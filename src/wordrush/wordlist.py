"""Word lists for typing sessions.

DEFAULT_WORDS is a built-in set of everyday English words, lowercase ASCII,
3-8 characters. load_words() reads a custom list from disk.
"""

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Union

DEFAULT_WORDS = tuple("""
apple banana cherry grape lemon mango melon olive peach pear plum berry
bread butter cheese cookie honey pasta pepper salad sauce soup sugar toast
river ocean forest desert island valley meadow canyon glacier harbor lagoon
cloud storm thunder rain snow frost breeze sunset sunrise shadow rainbow
tiger zebra rabbit turtle dolphin falcon parrot monkey donkey beaver badger
spider beetle insect lizard salmon whale eagle panda camel horse mouse
chair table window door carpet pillow blanket mirror shelf drawer lamp
kitchen garden garage attic cellar hallway balcony bedroom office library
pencil marker eraser paper folder stapler notebook ruler scissors envelope
guitar piano violin drum flute trumpet cello banjo harp organ
doctor nurse farmer pilot baker sailor painter teacher driver singer writer
yellow purple orange silver golden crimson violet indigo scarlet maroon
happy brave calm eager gentle jolly kind lively proud quiet silly witty
quick slow bright dark heavy light smooth rough narrow wide tall short
jump climb swim dance laugh smile whisper shout listen travel wander
build create design gather measure observe protect repair search share
morning evening midnight weekend holiday season autumn winter spring summer
castle bridge tower temple palace village market station museum stadium
rocket planet comet galaxy orbit meteor crater lunar solar nebula
engine wheel rudder anchor sail ladder hammer shovel bucket rope chain
button pocket jacket sweater scarf glove boots helmet ribbon collar
letter number answer question puzzle riddle secret signal message story
marble pebble crystal diamond copper bronze granite cobalt nickel quartz
circle square triangle spiral arrow corner center border edge surface
friend family cousin uncle neighbor stranger partner captain member leader
coffee cocoa juice water milk tea lemonade cider
basket candle bottle kettle teapot saucer napkin spoon fork plate
""".split())


def _load_xml(path: Path) -> list[str]:
    try:
        root = ET.parse(path).getroot()
    except ET.ParseError as e:
        raise ValueError(f"Malformed word list {path}: {e}") from e
    words = []
    for element in root.iter('word'):
        text = (element.text or '').strip()
        if text:
            words.append(text)
    return words


def _load_text(path: Path) -> list[str]:
    words = []
    with open(path, encoding='utf-8') as f:
        for line in f:
            line = line.split('#', 1)[0].strip()
            if line:
                words.extend(line.split())
    return words


def load_words(path: Union[str, Path]) -> list[str]:
    """Read a word list from file.

    `.xml` files are scanned for <word> elements, e.g.::

        <words>
            <word>apple</word>
            <word>banana</word>
        </words>

    Any other file is plain text with whitespace-separated words; blank lines
    and `#` comments are ignored. Order and duplicates are preserved.
    """
    path = Path(path)
    if path.suffix.lower() == '.xml':
        return _load_xml(path)
    return _load_text(path)
