"""Country names, normalised to lower case without spaces or hyphens, mapped to ISO 3166-1 alpha-2 codes."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

# Each line: an ISO2 code followed by every normalised name that resolves to it.
_TABLE = """
AF afghanistan
AX alandislands
AL albania
DZ algeria
AS americansamoa
AD andorra
AO angola
AI anguilla
AQ antarctica
AG antiguaandbarbuda antigua&barbuda
AR argentina
AM armenia
AW aruba
AU australia
AT austria
AZ azerbaijan
BS bahamas
BH bahrain
BD bangladesh
BB barbados
BY belarus
BE belgium
BZ belize
BJ benin
BM bermuda
BT bhutan
BO bolivia
BQ bonaire
BA bosniaandherzegovina bosnia&herzegovina
BW botswana
BV bouvetisland
BR brazil
IO britishindianoceanterritory
BN brunei bruneidarussalam
BG bulgaria
BF burkinafaso
BI burundi
CV caboverde
KH cambodia
CM cameroon
CA canada
KY caymanislands
CF centralafricanrepublic
TD chad
CL chile
CN china peoplesrepublicofchina
CX christmasisland
CC cocoskeelingislands
CO colombia
KM comoros
CD congodemocraticrepublic drcongo
CG congo
CK cookislands
CR costarica
CI cotedivoire ivorycoast
HR croatia
CU cuba
CW curacao
CY cyprus
CZ czechrepublic czechia
DK denmark
DJ djibouti
DM dominica
DO dominicanrepublic
EC ecuador
EG egypt
SV elsalvador
GQ equatorialguinea
ER eritrea
EE estonia
SZ eswatini swaziland
ET ethiopia
FK falklandislands
FO faroeislands
FJ fiji
FI finland
FR france
GF frenchguiana
PF frenchpolynesia
TF frenchsouthernterritories
GA gabon
GM gambia
GE georgia
DE germany
GH ghana
GI gibraltar
GR greece
GL greenland
GD grenada
GP guadeloupe
GU guam
GT guatemala
GG guernsey
GN guinea
GW guineabissau
GY guyana
HT haiti
HM heardislandandmcdonaldislands heardisland&mcdonaldislands
VA vaticancity holysee
HN honduras
HK hongkong
HU hungary
IS iceland
IN india
ID indonesia
IR iran
IQ iraq
IE ireland
IM isleofman
IL israel
IT italy
JM jamaica
JP japan
JE jersey
JO jordan
KZ kazakhstan
KE kenya
KI kiribati
XK kosovo
KP northkorea
KR southkorea korea
KW kuwait
KG kyrgyzstan
LA laos
LV latvia
LB lebanon
LS lesotho
LR liberia
LY libya
LI liechtenstein
LT lithuania
LU luxembourg
MO macao
MK macedonia northmacedonia
MG madagascar
MW malawi
MY malaysia
MV maldives
ML mali
MT malta
MH marshallislands
MQ martinique
MR mauritania
MU mauritius
YT mayotte
MX mexico
FM micronesia
MD moldova
MC monaco
MN mongolia
ME montenegro
MS montserrat
MA morocco
MZ mozambique
MM myanmar burma
NA namibia
NR nauru
NP nepal
NL netherlands
NC newcaledonia
NZ newzealand
NI nicaragua
NE niger
NG nigeria
NU niue
NF norfolkisland
MP northernmarianaislands
NO norway
OM oman
PK pakistan
PW palau
PS palestine
PA panama
PG papuanewguinea
PY paraguay
PE peru
PH philippines
PN pitcairn
PL poland
PT portugal
PR puertorico
QA qatar
RE reunion
RO romania
RU russia russianfederation
RW rwanda
BL saintbarthelemy
SH sainthelena
KN saintkittsandnevis saintkitts&nevis
LC saintlucia
MF saintmartin
PM saintpierreandmiquelon saintpierre&miquelon
VC saintvincentandthegrenadines saintvincent&thegrenadines
WS samoa
SM sanmarino
ST saotomeandprincipe saotome&principe saotome
SA saudiarabia
SN senegal
SR serbia suriname
SY seychelles syria syrianarabrepublic
SL sierraleone
SG singapore
SX sintmaarten
SK slovakia
SI slovenia
SB solomonislands
SO somalia
ZA southafrica
GS southgeorgiaandsouthsandwichislands southgeorgia southsandwichislands sandwichislands
SS southsudan
ES spain
LK srilanka
SD sudan
SJ svalbardandjanmayen svalbard&janmayen
SE sweden
CH switzerland
TW taiwan
TJ tajikistan
TZ tanzania
TH thailand
TL timorleste easttimor
TG togo
TK tokelau
TO tonga
TT trinidadandtobago trinidad&tobago
TN tunisia
TR turkey turkiye
TM turkmenistan
TC turksandcaicos turks&caicos
TV tuvalu
UG uganda
UA ukraine
AE unitedarabemirates
GB unitedkingdom greatbritain
US unitedstates unitedstatesofamerica usa
UM usminoroutlyingislands unitedstatesminoroutlyingislands
UY uruguay
UZ uzbekistan
VU vanuatu
VE venezuela
VN vietnam
VG britishvirginislands
VI usvirginislands unitedstatesvirginislands
WF wallisandfutuna wallis&futuna
EH westernsahara
YE yemen
ZM zambia
ZW zimbabwe
"""


def _build(table: str) -> dict[str, str]:
    names: dict[str, str] = {}
    for line in table.strip().splitlines():
        code, *aliases = line.split()
        names.update((alias, code) for alias in aliases)
    return names


COUNTRY_NAMES: Mapping[str, str] = MappingProxyType(_build(_TABLE))


def lookup_name(name: str) -> str | None:
    """Return the ISO2 code for an already normalised country name, or None."""
    return COUNTRY_NAMES.get(name)