"""ISO 3166-1 alpha-2 and alpha-3 codes, in lower case, mapped to alpha-2 codes."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

ISO2_CODES: Mapping[str, str] = MappingProxyType(
    {
        "af": "AF", "ax": "AX", "al": "AL", "dz": "DZ", "as": "AS", "ad": "AD",
        "ao": "AO", "ai": "AI", "aq": "AQ", "ag": "AG", "ar": "AR", "am": "AM",
        "aw": "AW", "au": "AU", "at": "AT", "az": "AZ", "bs": "BS", "bh": "BH",
        "bd": "BD", "bb": "BB", "by": "BY", "be": "BE", "bz": "BZ", "bj": "BJ",
        "bm": "BM", "bt": "BT", "bo": "BO", "bq": "BQ", "ba": "BA", "bw": "BW",
        "bv": "BV", "br": "BR", "io": "IO", "bn": "BN", "bg": "BG", "bf": "BF",
        "bi": "BI", "cv": "CV", "kh": "KH", "cm": "CM", "ca": "CA", "ky": "KY",
        "cf": "CF", "td": "TD", "cl": "CL", "cn": "CN", "cx": "CX", "cc": "CC",
        "co": "CO", "km": "KM", "cd": "CD", "cg": "CG", "ck": "CK", "cr": "CR",
        "ci": "CI", "hr": "HR", "cu": "CU", "cw": "CW", "cy": "CY", "cz": "CZ",
        "dk": "DK", "dj": "DJ", "dm": "DM", "do": "DO", "ec": "EC", "eg": "EG",
        "sv": "SV", "gq": "GQ", "er": "ER", "ee": "EE", "et": "ET", "fk": "FK",
        "fo": "FO", "fj": "FJ", "fi": "FI", "fr": "FR", "gf": "GF", "pf": "PF",
        "tf": "TF", "ga": "GA", "gm": "GM", "ge": "GE", "de": "DE", "gh": "GH",
        "gi": "GI", "gr": "GR", "gl": "GL", "gd": "GD", "gp": "GP", "gu": "GU",
        "gt": "GT", "gg": "GG", "gn": "GN", "gw": "GW", "gy": "GY", "ht": "HT",
        "hm": "HM", "va": "VA", "hn": "HN", "hk": "HK", "hu": "HU", "is": "IS",
        "in": "IN", "id": "ID", "ir": "IR", "iq": "IQ", "ie": "IE", "im": "IM",
        "il": "IL", "it": "IT", "jm": "JM", "jp": "JP", "je": "JE", "jo": "JO",
        "kz": "KZ", "ke": "KE", "ki": "KI", "kp": "KP", "kr": "KR", "kw": "KW",
        "kg": "KG", "la": "LA", "lv": "LV", "lb": "LB", "ls": "LS", "lr": "LR",
        "ly": "LY", "li": "LI", "lt": "LT", "lu": "LU", "mo": "MO", "mk": "MK",
        "mg": "MG", "mw": "MW", "my": "MY", "mv": "MV", "ml": "ML", "mt": "MT",
        "mh": "MH", "mq": "MQ", "mr": "MR", "mu": "MU", "yt": "YT", "mx": "MX",
        "fm": "FM", "md": "MD", "mc": "MC", "mn": "MN", "me": "ME", "ms": "MS",
        "ma": "MA", "mz": "MZ", "mm": "MM", "na": "NA", "nr": "NR", "np": "NP",
        "nl": "NL", "nc": "NC", "nz": "NZ", "ni": "NI", "ne": "NE", "ng": "NG",
        "nu": "NU", "nf": "NF", "mp": "MP", "no": "NO", "om": "OM", "pk": "PK",
        "pw": "PW", "ps": "PS", "pa": "PA", "pg": "PG", "py": "PY", "pe": "PE",
        "ph": "PH", "pn": "PN", "pl": "PL", "pt": "PT", "pr": "PR", "qa": "QA",
        "re": "RE", "ro": "RO", "ru": "RU", "rw": "RW", "bl": "BL", "sh": "SH",
        "kn": "KN", "lc": "LC", "mf": "MF", "pm": "PM", "vc": "VC", "ws": "WS",
        "sm": "SM", "st": "ST", "sa": "SA", "sn": "SN", "sr": "SR", "sy": "SY",
        "sl": "SL", "sg": "SG", "sx": "SX", "sk": "SK", "si": "SI", "sb": "SB",
        "so": "SO", "za": "ZA", "gs": "GS", "ss": "SS", "es": "ES", "lk": "LK",
        "sd": "SD", "sj": "SJ", "sz": "SZ", "se": "SE", "ch": "CH", "tw": "TW",
        "tj": "TJ", "tz": "TZ", "th": "TH", "tl": "TL", "tg": "TG", "tk": "TK",
        "to": "TO", "tt": "TT", "tn": "TN", "tr": "TR", "tm": "TM", "tc": "TC",
        "tv": "TV", "ug": "UG", "ua": "UA", "ae": "AE", "gb": "GB", "us": "US",
        "um": "UM", "uy": "UY", "uz": "UZ", "vu": "VU", "ve": "VE", "vn": "VN",
        "vg": "VG", "vi": "VI", "wf": "WF", "eh": "EH", "xk": "XK", "ye": "YE",
        "zm": "ZM", "zw": "ZW",
    }
)

ISO3_CODES: Mapping[str, str] = MappingProxyType(
    {
        "afg": "AF", "ala": "AX", "alb": "AL", "dza": "DZ", "asm": "AS", "and": "AD",
        "ago": "AO", "aia": "AI", "ata": "AQ", "atg": "AG", "arg": "AR", "arm": "AM",
        "abw": "AW", "aus": "AU", "aut": "AT", "aze": "AZ", "bhs": "BS", "bhr": "BH",
        "bgd": "BD", "brb": "BB", "blr": "BY", "bel": "BE", "blz": "BZ", "ben": "BJ",
        "bmu": "BM", "btn": "BT", "bol": "BO", "bes": "BQ", "bih": "BA", "bwa": "BW",
        "bvt": "BV", "bra": "BR", "iot": "IO", "brn": "BN", "bgr": "BG", "bfa": "BF",
        "bdi": "BI", "cpv": "CV", "khm": "KH", "cmr": "CM", "can": "CA", "cym": "KY",
        "caf": "CF", "tcd": "TD", "chl": "CL", "chn": "CN", "cxm": "CX", "cck": "CC",
        "col": "CO", "com": "KM", "cod": "CD", "cog": "CG", "cok": "CK", "cri": "CR",
        "civ": "CI", "hrv": "HR", "cub": "CU", "cuw": "CW", "cyp": "CY", "cze": "CZ",
        "dnk": "DK", "dji": "DJ", "dma": "DM", "dom": "DO", "ecu": "EC", "egy": "EG",
        "slv": "SV", "gnq": "GQ", "eri": "ER", "est": "EE", "eth": "ET", "flk": "FK",
        "fro": "FO", "fji": "FJ", "fin": "FI", "fra": "FR", "guf": "GF", "pyf": "PF",
        "atf": "TF", "gab": "GA", "gmb": "GM", "geo": "GE", "deu": "DE", "gha": "GH",
        "gib": "GI", "grc": "GR", "grl": "GL", "grd": "GD", "glp": "GP", "gum": "GU",
        "gtm": "GT", "ggy": "GG", "gin": "GN", "gnb": "GW", "guy": "GY", "hti": "HT",
        "hmd": "HM", "vat": "VA", "hnd": "HN", "hkg": "HK", "hun": "HU", "isl": "IS",
        "ind": "IN", "idn": "ID", "irn": "IR", "irq": "IQ", "irl": "IE", "imn": "IM",
        "isr": "IL", "ita": "IT", "jam": "JM", "jpn": "JP", "jey": "JE", "jor": "JO",
        "kaz": "KZ", "ken": "KE", "kir": "KI", "prk": "KP", "kor": "KR", "kwt": "KW",
        "kgz": "KG", "lao": "LA", "lva": "LV", "lbn": "LB", "lso": "LS", "lbr": "LR",
        "lby": "LY", "lie": "LI", "ltu": "LT", "lux": "LU", "mac": "MO", "mkd": "MK",
        "mdg": "MG", "mwi": "MW", "mys": "MY", "mdv": "MV", "mli": "ML", "mlt": "MT",
        "mhl": "MH", "mtq": "MQ", "mrt": "MR", "mus": "MU", "myt": "YT", "mex": "MX",
        "fsm": "FM", "mda": "MD", "mco": "MC", "mng": "MN", "mne": "ME", "msr": "MS",
        "mar": "MA", "moz": "MZ", "mmr": "MM", "nam": "NA", "nru": "NR", "npl": "NP",
        "nld": "NL", "ncl": "NC", "nz": "NZ", "nic": "NI", "ner": "NE", "nga": "NG",
        "niu": "NU", "nfk": "NF", "mnp": "MP", "nor": "NO", "omn": "OM", "pak": "PK",
        "plw": "PW", "pse": "PS", "pan": "PA", "png": "PG", "pry": "PY", "per": "PE",
        "phl": "PH", "pcn": "PN", "pol": "PL", "prt": "PT", "pri": "PR", "qat": "QA",
        "reu": "RE", "rou": "RO", "rus": "RU", "rwa": "RW", "blm": "BL", "shn": "SH",
        "kna": "KN", "lca": "LC", "maf": "MF", "spm": "PM", "vct": "VC", "wsm": "WS",
        "smo": "SM", "stp": "ST", "sau": "SA", "sen": "SN", "srb": "SR", "syc": "SY",
        "sle": "SL", "sgp": "SG", "sxm": "SX", "svk": "SK", "svn": "SI", "slb": "SB",
        "som": "SO", "zaf": "ZA", "sgs": "GS", "ssd": "SS", "esp": "ES", "lka": "LK",
        "sdn": "SD", "sur": "SR", "sjm": "SJ", "swz": "SZ", "swe": "SE", "che": "CH",
        "syr": "SY", "twn": "TW", "tjk": "TJ", "tza": "TZ", "tha": "TH", "tls": "TL",
        "tgo": "TG", "tk": "TK", "ton": "TO", "tto": "TT", "tun": "TN", "tur": "TR",
        "tkm": "TM", "tca": "TC", "tuv": "TV", "uga": "UG", "ukr": "UA", "are": "AE",
        "gbr": "GB", "usa": "US", "umi": "UM", "ury": "UY", "uzb": "UZ", "vut": "VU",
        "ven": "VE", "vnm": "VN", "vgb": "VG", "vir": "VI", "wlf": "WF", "xkk": "XK",
        "esh": "EH", "yem": "YE", "zmb": "ZM", "zwe": "ZW",
    }
)

COUNTRY_CODES: Mapping[str, str] = MappingProxyType({**ISO2_CODES, **ISO3_CODES})


def lookup_code(code: str) -> str | None:
    """Return the ISO2 code for a lower-case ISO2 or ISO3 code, or None."""
    return COUNTRY_CODES.get(code)