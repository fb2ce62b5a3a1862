"""Kana → romaji mapping tables."""

from collections.abc import Mapping
from typing import Dict, Iterable, Iterator, Sequence, Tuple

from kanatype.nlp.base import RomajiTableError

class RomajiTable:
    """Immutable mapping from kana units (1 or 2 characters) to romaji spellings.

    Built from an explicitly ordered sequence of ``(unit, spellings)`` pairs;
    each unit's spellings are kept most-preferred first.
    """

    MAX_UNIT_LENGTH = 2

    def __init__(self, entries: Iterable[Tuple[str, Sequence[str]]]):
        if isinstance(entries, Mapping):
            raise RomajiTableError("<mapping>", "entries must be an ordered sequence of (unit, spellings) pairs")

        table: Dict[str, Tuple[str, ...]] = {}
        for unit, spellings in entries:
            if not 1 <= len(unit) <= self.MAX_UNIT_LENGTH:
                raise RomajiTableError(unit, f"kana unit must be 1 to {self.MAX_UNIT_LENGTH} characters")
            if isinstance(spellings, str):
                raise RomajiTableError(unit, "spellings must be a sequence of strings, not a string")
            if not spellings:
                raise RomajiTableError(unit, "no spellings given")
            if any(not spelling for spelling in spellings):
                raise RomajiTableError(unit, "empty spelling")
            if unit in table:
                raise RomajiTableError(unit, "duplicate kana unit")
            table[unit] = tuple(spellings)
        self._table = table

    def lookup(self, unit: str) -> Tuple[str, ...]:
        """Return the spellings of *unit*, or an empty tuple if it is unregistered."""
        return self._table.get(unit, ())

    def units(self) -> Iterator[str]:
        return iter(self._table)

    def __contains__(self, unit: object) -> bool:
        return unit in self._table

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"RomajiTable({len(self)} units)"


# Google Japanese Input romaji table, most-preferred spelling first.
# Small-tsu doubling and the bare nasal "n" are synthesized by the DAG builder.
GOOGLE_IME_ENTRIES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("てゅ", ("thu", "t'yu")),
    ("でゅ", ("dhu", "d'yu")),
    ("ふゅ", ("fyu", "hwyu")),
    ("っ", ("xtu", "ltu", "xtsu", "ltsu")),
    ("ゔゃ", ("vya",)),
    ("ゔぃ", ("vyi", "vi")),
    ("ゔゅ", ("vyu",)),
    ("ゔぇ", ("vye", "ve")),
    ("ゔょ", ("vyo",)),
    ("きゃ", ("kya",)),
    ("きぃ", ("kyi",)),
    ("きゅ", ("kyu",)),
    ("きぇ", ("kye",)),
    ("きょ", ("kyo",)),
    ("ぎゃ", ("gya",)),
    ("ぎぃ", ("gyi",)),
    ("ぎゅ", ("gyu",)),
    ("ぎぇ", ("gye",)),
    ("ぎょ", ("gyo",)),
    ("しゃ", ("sya", "sha")),
    ("しぃ", ("syi",)),
    ("しゅ", ("syu", "shu")),
    ("しぇ", ("sye", "she")),
    ("しょ", ("syo", "sho")),
    ("し", ("shi", "si", "ci")),
    ("じゃ", ("zya", "jya", "ja")),
    ("じぃ", ("zyi", "jyi")),
    ("じゅ", ("zyu", "jyu", "ju")),
    ("じぇ", ("zye", "jye", "je")),
    ("じょ", ("zyo", "jyo", "jo")),
    ("ちゃ", ("tya", "cha", "cya")),
    ("ちぃ", ("tyi", "cyi")),
    ("ちゅ", ("tyu", "chu", "cyu")),
    ("ちぇ", ("tye", "che", "cye")),
    ("ちょ", ("tyo", "cho", "cyo")),
    ("ち", ("chi", "ti")),
    ("ぢゃ", ("dya",)),
    ("ぢぃ", ("dyi",)),
    ("ぢゅ", ("dyu",)),
    ("ぢぇ", ("dye",)),
    ("ぢょ", ("dyo",)),
    ("つぁ", ("tsa",)),
    ("つぃ", ("tsi",)),
    ("つぇ", ("tse",)),
    ("つぉ", ("tso",)),
    ("てゃ", ("tha",)),
    ("てぃ", ("thi", "t'i")),
    ("てぇ", ("the",)),
    ("てょ", ("tho",)),
    ("でゃ", ("dha",)),
    ("でぃ", ("dhi", "d'i")),
    ("でぇ", ("dhe",)),
    ("でょ", ("dho",)),
    ("とぁ", ("twa",)),
    ("とぃ", ("twi",)),
    ("とぅ", ("twu", "t'u")),
    ("とぇ", ("twe",)),
    ("とぉ", ("two",)),
    ("どぁ", ("dwa",)),
    ("どぃ", ("dwi",)),
    ("どぅ", ("dwu", "d'u")),
    ("どぇ", ("dwe",)),
    ("どぉ", ("dwo",)),
    ("にゃ", ("nya",)),
    ("にぃ", ("nyi",)),
    ("にゅ", ("nyu",)),
    ("にぇ", ("nye",)),
    ("にょ", ("nyo",)),
    ("ひゃ", ("hya",)),
    ("ひぃ", ("hyi",)),
    ("ひゅ", ("hyu",)),
    ("ひぇ", ("hye",)),
    ("ひょ", ("hyo",)),
    ("びゃ", ("bya",)),
    ("びぃ", ("byi",)),
    ("びゅ", ("byu",)),
    ("びぇ", ("bye",)),
    ("びょ", ("byo",)),
    ("ぴゃ", ("pya",)),
    ("ぴぃ", ("pyi",)),
    ("ぴゅ", ("pyu",)),
    ("ぴぇ", ("pye",)),
    ("ぴょ", ("pyo",)),
    ("ふゃ", ("fya",)),
    ("ふょ", ("fyo",)),
    ("ふぁ", ("fa", "hwa")),
    ("ふぃ", ("fi", "hwi")),
    ("ふぇ", ("fe", "hwe")),
    ("ふぉ", ("fo", "hwo")),
    ("みゃ", ("mya",)),
    ("みぃ", ("myi",)),
    ("みゅ", ("myu",)),
    ("みぇ", ("mye",)),
    ("みょ", ("myo",)),
    ("りゃ", ("rya",)),
    ("りぃ", ("ryi",)),
    ("りゅ", ("ryu",)),
    ("りぇ", ("rye",)),
    ("りょ", ("ryo",)),
    ("ぃ", ("xi", "li", "lyi", "xyi")),
    ("ぇ", ("xe", "le", "lye", "xye")),
    ("ゕ", ("xka", "lka")),
    ("ゖ", ("xke", "lke")),
    ("くぁ", ("qa", "kwa")),
    ("くぃ", ("qi", "kwi")),
    ("くぅ", ("kwu",)),
    ("くぇ", ("qe", "kwe")),
    ("くぉ", ("qo", "kwo")),
    ("ぐぁ", ("gwa",)),
    ("ぐぃ", ("gwi",)),
    ("ぐぅ", ("gwu",)),
    ("ぐぇ", ("gwe",)),
    ("ぐぉ", ("gwo",)),
    ("すぁ", ("swa",)),
    ("すぃ", ("swi",)),
    ("すぅ", ("swu",)),
    ("すぇ", ("swe",)),
    ("すぉ", ("swo",)),
    ("ずぁ", ("zwa",)),
    ("ずぃ", ("zwi",)),
    ("ずぅ", ("zwu",)),
    ("ずぇ", ("zwe",)),
    ("ずぉ", ("zwo",)),
    ("つ", ("ts", "tsu")),
    ("ゃ", ("xya", "lya")),
    ("ゐ", ("wyi",)),
    ("ゅ", ("xyu", "lyu")),
    ("ゑ", ("wye",)),
    ("ょ", ("xyo", "lyo")),
    ("ゎ", ("xwa", "lwa")),
    ("うぁ", ("wha",)),
    ("うぃ", ("wi", "whi")),
    ("う", ("u", "wu", "whu")),
    ("うぇ", ("we", "whe")),
    ("うぉ", ("who",)),
    ("・", ("z/", "/")),
    ("…", ("z.",)),
    ("‥", ("z,",)),
    ("←", ("zh",)),
    ("↓", ("zj",)),
    ("↑", ("zk",)),
    ("→", ("zl",)),
    ("〜", ("~", "z-")),
    ("『", ("z[",)),
    ("』", ("z]",)),
    ("ゔぁ", ("va",)),
    ("ゔ", ("vu",)),
    ("ゔぉ", ("vo",)),
    ("ふ", ("hu", "fu")),
    ("ん", ("nn", "xn", "n'")),
    ("ぁ", ("xa", "la")),
    ("ぅ", ("xu", "lu")),
    ("ぉ", ("xo", "lo")),
    ("いぇ", ("ye",)),
    ("か", ("ka", "ca")),
    ("き", ("ki",)),
    ("く", ("ku", "cu", "qu")),
    ("け", ("ke",)),
    ("こ", ("ko", "co")),
    ("が", ("ga",)),
    ("ぎ", ("gi",)),
    ("ぐ", ("gu",)),
    ("げ", ("ge",)),
    ("ご", ("go",)),
    ("さ", ("sa",)),
    ("す", ("su",)),
    ("せ", ("se", "ce")),
    ("そ", ("so",)),
    ("ざ", ("za",)),
    ("じ", ("ji", "zi")),
    ("ず", ("zu",)),
    ("ぜ", ("ze",)),
    ("ぞ", ("zo",)),
    ("た", ("ta",)),
    ("て", ("te",)),
    ("と", ("to",)),
    ("だ", ("da",)),
    ("ぢ", ("di",)),
    ("づ", ("du",)),
    ("で", ("de",)),
    ("ど", ("do",)),
    ("な", ("na",)),
    ("に", ("ni",)),
    ("ぬ", ("nu",)),
    ("ね", ("ne",)),
    ("の", ("no",)),
    ("は", ("ha",)),
    ("ひ", ("hi",)),
    ("へ", ("he",)),
    ("ほ", ("ho",)),
    ("ば", ("ba",)),
    ("び", ("bi",)),
    ("ぶ", ("bu",)),
    ("べ", ("be",)),
    ("ぼ", ("bo",)),
    ("ぱ", ("pa",)),
    ("ぴ", ("pi",)),
    ("ぷ", ("pu",)),
    ("ぺ", ("pe",)),
    ("ぽ", ("po",)),
    ("ま", ("ma",)),
    ("み", ("mi",)),
    ("む", ("mu",)),
    ("め", ("me",)),
    ("も", ("mo",)),
    ("や", ("ya",)),
    ("ゆ", ("yu",)),
    ("よ", ("yo",)),
    ("ら", ("ra",)),
    ("り", ("ri",)),
    ("る", ("ru",)),
    ("れ", ("re",)),
    ("ろ", ("ro",)),
    ("わ", ("wa",)),
    ("を", ("wo",)),
    ("ー", ("-",)),
    ("。", (".",)),
    ("、", (",",)),
    ("「", ("[",)),
    ("」", ("]",)),
    ("あ", ("a",)),
    ("い", ("i",)),
    ("え", ("e",)),
    ("お", ("o",)),
)

GOOGLE_IME_TABLE = RomajiTable(GOOGLE_IME_ENTRIES)
