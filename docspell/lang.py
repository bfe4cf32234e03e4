"""Five character language and country codes, such as ``en_US``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

_LANGUAGES = frozenset(
    """
    aa ab ae af ak am an ar as av ay az ba be bg bi bm bn bo br bs ca ce ch
    co cr cs cu cv cy da de dv dz ee el en eo es et eu fa ff fi fj fo fr fy
    ga gd gl gn gu gv ha he hi ho hr ht hu hy hz ia id ie ig ii ik io is it
    iu ja jv ka kg ki kj kk kl km kn ko kr ks ku kv kw ky la lb lg li ln lo
    lt lu lv mg mh mi mk ml mn mr ms mt my na nb nd ne ng nl nn no nr nv ny
    oc oj om or os pa pi pl ps pt qu rm rn ro ru rw sa sc sd se sg si sk sl
    sm sn so sq sr ss st su sv sw ta te tg th ti tk tl tn to tr ts tt tw ty
    ug uk ur uz ve vi vo wa wo xh yi yo za zh zu
    """.split()
)

_COUNTRIES = frozenset(
    """
    AD AE AF AG AI AL AM AO AQ AR AS AT AU AW AX AZ BA BB BD BE BF BG BH BI
    BJ BL BM BN BO BQ BR BS BT BV BW BY BZ CA CC CD CF CG CH CI CK CL CM CN
    CO CR CU CV CW CX CY CZ DE DJ DK DM DO DZ EC EE EG EH ER ES ET FI FJ FK
    FM FO FR GA GB GD GE GF GG GH GI GL GM GN GP GQ GR GS GT GU GW GY HK HM
    HN HR HT HU ID IE IL IM IN IO IQ IR IS IT JE JM JO JP KE KG KH KI KM KN
    KP KR KW KY KZ LA LB LC LI LK LR LS LT LU LV LY MA MC MD ME MF MG MH MK
    ML MM MN MO MP MQ MR MS MT MU MV MW MX MY MZ NA NC NE NF NG NI NL NO NP
    NR NU NZ OM PA PE PF PG PH PK PL PM PN PR PS PT PW PY QA RE RO RS RU RW
    SA SB SC SD SE SG SH SI SJ SK SL SM SN SO SR SS ST SV SX SY SZ TC TD TF
    TG TH TJ TK TL TM TN TO TR TT TV TW TZ UA UG UM US UY UZ VA VC VE VG VI
    VN VU WF WS YE YT ZA ZM ZW
    """.split()
)


class Lang5Error(ValueError):
    """Raised when a text is not a valid ``LL_CC`` code."""


def _spacer_error(found: str) -> Lang5Error:
    return Lang5Error(f"Wrong character, expected '_' found '{found}'")


@dataclass(frozen=True, eq=False)
class Lang5:
    """An ISO 639-1 language code combined with an ISO 3166-1 alpha-2 country code."""

    lang: str
    country: str

    EN_US: ClassVar[Lang5]

    def __post_init__(self) -> None:
        if self.lang not in _LANGUAGES:
            raise Lang5Error(f"Unknown ISO 639-1 language code: {self.lang!r}")
        if self.country not in _COUNTRIES:
            raise Lang5Error(f"Unknown ISO 3166-1 country code: {self.country!r}")

    @classmethod
    def parse(cls, text: str) -> Lang5:
        """Parse a code of the form ``LL_CC``."""
        if len(text) != 5:
            raise _spacer_error("l")
        if text[:2] not in _LANGUAGES:
            raise _spacer_error("2")
        if text[2] != "_":
            raise _spacer_error(text[2])
        if text[3:] not in _COUNTRIES:
            raise Lang5Error(f"Unknown ISO 3166-1 country code: {text[3:]!r}")
        return cls(text[:2], text[3:])

    def __str__(self) -> str:
        return f"{self.lang}_{self.country}"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Lang5):
            return (self.lang, self.country) == (other.lang, other.country)
        if isinstance(other, str):
            return str(self) == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(str(self))


Lang5.EN_US = Lang5("en", "US")