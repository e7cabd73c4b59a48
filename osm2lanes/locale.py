"""Context about the place where a way exists: country and driving side."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from osm2lanes.highway import HighwayImportance, HighwayType
from osm2lanes.metric import Metre
from osm2lanes.road import Color, Designated

__all__ = [
    "Country",
    "DrivingSide",
    "Locale",
    "LocaleBuilder",
    "get_countries",
]

# ISO 3166-1: alpha-2, alpha-3 and short name.
_COUNTRY_TABLE = """\
AD AND Andorra
AE ARE United Arab Emirates
AF AFG Afghanistan
AG ATG Antigua and Barbuda
AI AIA Anguilla
AL ALB Albania
AM ARM Armenia
AO AGO Angola
AQ ATA Antarctica
AR ARG Argentina
AS ASM American Samoa
AT AUT Austria
AU AUS Australia
AW ABW Aruba
AX ALA Åland Islands
AZ AZE Azerbaijan
BA BIH Bosnia and Herzegovina
BB BRB Barbados
BD BGD Bangladesh
BE BEL Belgium
BF BFA Burkina Faso
BG BGR Bulgaria
BH BHR Bahrain
BI BDI Burundi
BJ BEN Benin
BL BLM Saint Barthélemy
BM BMU Bermuda
BN BRN Brunei Darussalam
BO BOL Bolivia
BQ BES Bonaire, Sint Eustatius and Saba
BR BRA Brazil
BS BHS Bahamas
BT BTN Bhutan
BV BVT Bouvet Island
BW BWA Botswana
BY BLR Belarus
BZ BLZ Belize
CA CAN Canada
CC CCK Cocos (Keeling) Islands
CD COD Democratic Republic of the Congo
CF CAF Central African Republic
CG COG Congo
CH CHE Switzerland
CI CIV Côte d'Ivoire
CK COK Cook Islands
CL CHL Chile
CM CMR Cameroon
CN CHN China
CO COL Colombia
CR CRI Costa Rica
CU CUB Cuba
CV CPV Cabo Verde
CW CUW Curaçao
CX CXR Christmas Island
CY CYP Cyprus
CZ CZE Czechia
DE DEU Germany
DJ DJI Djibouti
DK DNK Denmark
DM DMA Dominica
DO DOM Dominican Republic
DZ DZA Algeria
EC ECU Ecuador
EE EST Estonia
EG EGY Egypt
EH ESH Western Sahara
ER ERI Eritrea
ES ESP Spain
ET ETH Ethiopia
FI FIN Finland
FJ FJI Fiji
FK FLK Falkland Islands
FM FSM Micronesia
FO FRO Faroe Islands
FR FRA France
GA GAB Gabon
GB GBR United Kingdom of Great Britain and Northern Ireland
GD GRD Grenada
GE GEO Georgia
GF GUF French Guiana
GG GGY Guernsey
GH GHA Ghana
GI GIB Gibraltar
GL GRL Greenland
GM GMB Gambia
GN GIN Guinea
GP GLP Guadeloupe
GQ GNQ Equatorial Guinea
GR GRC Greece
GS SGS South Georgia and the South Sandwich Islands
GT GTM Guatemala
GU GUM Guam
GW GNB Guinea-Bissau
GY GUY Guyana
HK HKG Hong Kong
HM HMD Heard Island and McDonald Islands
HN HND Honduras
HR HRV Croatia
HT HTI Haiti
HU HUN Hungary
ID IDN Indonesia
IE IRL Ireland
IL ISR Israel
IM IMN Isle of Man
IN IND India
IO IOT British Indian Ocean Territory
IQ IRQ Iraq
IR IRN Iran
IS ISL Iceland
IT ITA Italy
JE JEY Jersey
JM JAM Jamaica
JO JOR Jordan
JP JPN Japan
KE KEN Kenya
KG KGZ Kyrgyzstan
KH KHM Cambodia
KI KIR Kiribati
KM COM Comoros
KN KNA Saint Kitts and Nevis
KP PRK North Korea
KR KOR South Korea
KW KWT Kuwait
KY CYM Cayman Islands
KZ KAZ Kazakhstan
LA LAO Laos
LB LBN Lebanon
LC LCA Saint Lucia
LI LIE Liechtenstein
LK LKA Sri Lanka
LR LBR Liberia
LS LSO Lesotho
LT LTU Lithuania
LU LUX Luxembourg
LV LVA Latvia
LY LBY Libya
MA MAR Morocco
MC MCO Monaco
MD MDA Moldova
ME MNE Montenegro
MF MAF Saint Martin
MG MDG Madagascar
MH MHL Marshall Islands
MK MKD North Macedonia
ML MLI Mali
MM MMR Myanmar
MN MNG Mongolia
MO MAC Macao
MP MNP Northern Mariana Islands
MQ MTQ Martinique
MR MRT Mauritania
MS MSR Montserrat
MT MLT Malta
MU MUS Mauritius
MV MDV Maldives
MW MWI Malawi
MX MEX Mexico
MY MYS Malaysia
MZ MOZ Mozambique
NA NAM Namibia
NC NCL New Caledonia
NE NER Niger
NF NFK Norfolk Island
NG NGA Nigeria
NI NIC Nicaragua
NL NLD Netherlands
NO NOR Norway
NP NPL Nepal
NR NRU Nauru
NU NIU Niue
NZ NZL New Zealand
OM OMN Oman
PA PAN Panama
PE PER Peru
PF PYF French Polynesia
PG PNG Papua New Guinea
PH PHL Philippines
PK PAK Pakistan
PL POL Poland
PM SPM Saint Pierre and Miquelon
PN PCN Pitcairn
PR PRI Puerto Rico
PS PSE Palestine
PT PRT Portugal
PW PLW Palau
PY PRY Paraguay
QA QAT Qatar
RE REU Réunion
RO ROU Romania
RS SRB Serbia
RU RUS Russian Federation
RW RWA Rwanda
SA SAU Saudi Arabia
SB SLB Solomon Islands
SC SYC Seychelles
SD SDN Sudan
SE SWE Sweden
SG SGP Singapore
SH SHN Saint Helena
SI SVN Slovenia
SJ SJM Svalbard and Jan Mayen
SK SVK Slovakia
SL SLE Sierra Leone
SM SMR San Marino
SN SEN Senegal
SO SOM Somalia
SR SUR Suriname
SS SSD South Sudan
ST STP Sao Tome and Principe
SV SLV El Salvador
SX SXM Sint Maarten
SY SYR Syria
SZ SWZ Eswatini
TC TCA Turks and Caicos Islands
TD TCD Chad
TF ATF French Southern Territories
TG TGO Togo
TH THA Thailand
TJ TJK Tajikistan
TK TKL Tokelau
TL TLS Timor-Leste
TM TKM Turkmenistan
TN TUN Tunisia
TO TON Tonga
TR TUR Turkey
TT TTO Trinidad and Tobago
TV TUV Tuvalu
TW TWN Taiwan
TZ TZA Tanzania
UA UKR Ukraine
UG UGA Uganda
UM UMI United States Minor Outlying Islands
US USA United States of America
UY URY Uruguay
UZ UZB Uzbekistan
VA VAT Holy See
VC VCT Saint Vincent and the Grenadines
VE VEN Venezuela
VG VGB Virgin Islands (British)
VI VIR Virgin Islands (U.S.)
VN VNM Viet Nam
VU VUT Vanuatu
WF WLF Wallis and Futuna
WS WSM Samoa
YE YEM Yemen
YT MYT Mayotte
ZA ZAF South Africa
ZM ZMB Zambia
ZW ZWE Zimbabwe
"""

# Countries in the UN M49 "Americas" region.
_AMERICAS = frozenset(
    """
    AG AI AR AW BB BL BM BO BQ BR BS BV BZ CA CL CO CR CU CW DM DO EC FK GD
    GF GL GP GS GT GY HN HT JM KN KY LC MF MQ MS MX NI PA PE PM PR PY SR SV
    SX TC TT US UY VC VE VG VI
    """.split()
)


@dataclass(frozen=True)
class Country:
    """An ISO 3166-1 country."""

    alpha2: str
    alpha3: str
    name: str

    @classmethod
    def from_alpha2(cls, code: str) -> Country:
        """Look up by two letter code, ignoring case; ValueError if unknown."""
        try:
            return _BY_ALPHA2[code.upper()]
        except KeyError:
            raise ValueError(f"unknown ISO 3166-1 alpha-2 code {code!r}") from None

    @classmethod
    def from_alpha3(cls, code: str) -> Country:
        """Look up by three letter code, ignoring case; ValueError if unknown."""
        try:
            return _BY_ALPHA3[code.upper()]
        except KeyError:
            raise ValueError(f"unknown ISO 3166-1 alpha-3 code {code!r}") from None

    @property
    def in_americas(self) -> bool:
        return self.alpha2 in _AMERICAS


_COUNTRIES = tuple(
    Country(*line.split(maxsplit=2)) for line in _COUNTRY_TABLE.splitlines() if line
)
_BY_ALPHA2 = {country.alpha2: country for country in _COUNTRIES}
_BY_ALPHA3 = {country.alpha3: country for country in _COUNTRIES}


def get_countries() -> list[Country]:
    """All known countries."""
    return list(_COUNTRIES)


class DrivingSide(Enum):
    """The side of the road vehicles travel on."""

    RIGHT = "right"
    LEFT = "left"

    def opposite(self) -> DrivingSide:
        return DrivingSide.LEFT if self is DrivingSide.RIGHT else DrivingSide.RIGHT

    def __str__(self) -> str:
        return self.value


_SPLIT_IMPORTANCE = frozenset(HighwayImportance)
_SHOULDER_IMPORTANCE = frozenset(
    {
        HighwayImportance.MOTORWAY,
        HighwayImportance.TRUNK,
        HighwayImportance.PRIMARY,
        HighwayImportance.SECONDARY,
    }
)


@dataclass
class Locale:
    """Context about the place where an OSM way exists."""

    country: Country | None = None
    iso_3166_2_subdivision: str | None = None
    driving_side: DrivingSide = DrivingSide.RIGHT

    @classmethod
    def builder(cls) -> LocaleBuilder:
        return LocaleBuilder()

    def travel_width(self, designated: Designated, highway_type: HighwayType) -> Metre:
        """Default width of a travel lane for ``designated`` users."""
        if designated in (Designated.MOTOR, Designated.BUS):
            if self.country is not None and self.country.alpha2 == "GB":
                return Metre(3.0)
            if self.country is not None and self.country.alpha2 == "NL":
                return Metre(3.35)
            return Metre(3.5)
        if designated is Designated.FOOT:
            return Metre(2.5)
        return Metre(2.0)

    def separator_motor_color(self) -> Color:
        """Paint colour between opposite directions of motor traffic."""
        if self.country is not None and self.country.in_americas:
            return Color.YELLOW
        return Color.WHITE

    def separator_motor_width(self) -> Metre:
        """Marking width between opposite directions of motor traffic."""
        if self.country is not None and self.country.alpha2 == "GB":
            return Metre(0.1)
        return Metre(0.2)

    def has_split_lanes(self, highway_type: HighwayType) -> bool:
        """Whether a highway without ``lanes=*`` has one lane each way."""
        return (
            highway_type.importance() in _SPLIT_IMPORTANCE
            or highway_type is HighwayType.RESIDENTIAL
        )

    def has_shoulder(self, highway_type: HighwayType) -> bool:
        """Whether the highway type has shoulders by default."""
        return highway_type.importance() in _SHOULDER_IMPORTANCE


class LocaleBuilder:
    """Collects what is known about a place and builds a Locale."""

    def __init__(self) -> None:
        self._alpha2: str | None = None
        self._alpha3: str | None = None
        self._subdivision: str | None = None
        self._country: Country | None = None
        self._driving_side: DrivingSide | None = None

    def iso_3166(self, code: str) -> LocaleBuilder:
        """Set an ISO 3166-1 alpha-2, alpha-3 or ISO 3166-2 code."""
        if len(code.encode()) == 2:
            self._alpha2 = code
        elif len(code.encode()) == 3:
            self._alpha3 = code
        else:
            alpha2, sep, subdivision = code.partition("-")
            if not sep:
                raise ValueError(f"cannot determine ISO 3166 from {code}")
            self._alpha2 = alpha2
            self._subdivision = subdivision
        return self

    def iso_3166_option(self, code: str | None) -> LocaleBuilder:
        if code is not None:
            self.iso_3166(code)
        return self

    def country(self, country: Country) -> LocaleBuilder:
        self._country = country
        return self

    def driving_side(self, side: DrivingSide) -> LocaleBuilder:
        self._driving_side = side
        return self

    def build(self) -> Locale:
        """Build the locale; conflicting country sources raise ValueError."""
        codes = (self._alpha2, self._alpha3)
        if self._country is not None:
            if any(code is not None for code in codes):
                raise ValueError("country given together with an ISO 3166 code")
            country: Country | None = self._country
        elif self._alpha2 is not None and self._alpha3 is not None:
            raise ValueError("both ISO 3166-1 alpha-2 and alpha-3 given")
        elif self._alpha2 is not None:
            country = _lookup(Country.from_alpha2, self._alpha2)
        elif self._alpha3 is not None:
            country = _lookup(Country.from_alpha3, self._alpha3)
        else:
            country = None
        return Locale(
            country=country,
            iso_3166_2_subdivision=self._subdivision,
            driving_side=self._driving_side or DrivingSide.RIGHT,
        )


def _lookup(find, code: str) -> Country | None:
    try:
        return find(code)
    except ValueError:
        return None