"""Static reference data: pillars, RECs, default countries and region colors."""

from models.country import CountryRegion
from models.project import Pillar, ProjectRegion, ProjectStage

PILLARS: list[str] = [pillar.value for pillar in Pillar]
PROJECT_REGIONS: list[str] = [region.value for region in ProjectRegion]
PROJECT_STAGES: list[str] = [stage.value for stage in ProjectStage]

DEFAULT_REGION_COLORS: dict[str, str] = {
    CountryRegion.NORTH.value: "hsl(200 70% 45%)",
    CountryRegion.WEST.value: "hsl(150 55% 45%)",
    CountryRegion.EAST.value: "hsl(280 60% 50%)",
    CountryRegion.CENTRAL.value: "hsl(30 65% 50%)",
    CountryRegion.SOUTH.value: "hsl(340 65% 50%)",
}

# Regional Economic Communities: code -> (full name, official member count)
REC_INFO: dict[str, tuple[str, int]] = {
    "COMESA": ("Common Market for Eastern and Southern Africa", 21),
    "EAC": ("East African Community", 7),
    "ECCAS": ("Economic Community of Central African States", 11),
    "ECOWAS": ("Economic Community of West African States", 15),
    "IGAD": ("Intergovernmental Authority on Development", 8),
    "SADC": ("Southern African Development Community", 16),
    "UMA": ("Arab Maghreb Union", 5),
    "CEN-SAD": ("Community of Sahel-Saharan States", 29),
}

# RECs shown even when they have no projects
ALWAYS_LISTED_RECS = frozenset({"COMESA", "EAC", "ECCAS", "ECOWAS", "IGAD", "SADC", "UMA"})

COUNTRY_RECS: dict[str, list[str]] = {
    "Burundi": ["COMESA", "EAC"],
    "Comoros": ["COMESA"],
    "Djibouti": ["COMESA", "IGAD"],
    "Egypt": ["COMESA", "CEN-SAD"],
    "Eritrea": ["COMESA", "IGAD"],
    "Eswatini": ["COMESA", "SADC"],
    "Ethiopia": ["COMESA", "IGAD"],
    "Kenya": ["COMESA", "EAC", "IGAD"],
    "Libya": ["COMESA", "CEN-SAD", "UMA"],
    "Madagascar": ["COMESA", "SADC"],
    "Malawi": ["COMESA", "SADC"],
    "Mauritius": ["COMESA", "SADC"],
    "Rwanda": ["COMESA", "EAC", "ECCAS"],
    "Seychelles": ["COMESA", "SADC"],
    "Somalia": ["COMESA", "IGAD"],
    "Sudan": ["COMESA", "IGAD", "CEN-SAD"],
    "Tunisia": ["UMA", "CEN-SAD"],
    "Uganda": ["COMESA", "EAC", "IGAD"],
    "Zambia": ["COMESA", "SADC"],
    "Zimbabwe": ["COMESA", "SADC"],
    "Tanzania": ["EAC", "SADC"],
    "South Sudan": ["EAC", "IGAD"],
    "Angola": ["ECCAS", "SADC"],
    "Cameroon": ["ECCAS", "CEN-SAD"],
    "Central African Republic": ["ECCAS", "CEN-SAD"],
    "Chad": ["ECCAS", "CEN-SAD"],
    "Congo": ["ECCAS"],
    "DR Congo": ["ECCAS", "SADC"],
    "Equatorial Guinea": ["ECCAS"],
    "Gabon": ["ECCAS"],
    "São Tomé and Príncipe": ["ECCAS"],
    "Benin": ["ECOWAS", "CEN-SAD"],
    "Burkina Faso": ["ECOWAS", "CEN-SAD"],
    "Cape Verde": ["ECOWAS"],
    "Côte d'Ivoire": ["ECOWAS", "CEN-SAD"],
    "Gambia": ["ECOWAS", "CEN-SAD"],
    "Ghana": ["ECOWAS", "CEN-SAD"],
    "Guinea": ["ECOWAS", "CEN-SAD"],
    "Guinea-Bissau": ["ECOWAS", "CEN-SAD"],
    "Liberia": ["ECOWAS", "CEN-SAD"],
    "Mali": ["ECOWAS", "CEN-SAD"],
    "Niger": ["ECOWAS", "CEN-SAD"],
    "Nigeria": ["ECOWAS", "CEN-SAD"],
    "Senegal": ["ECOWAS", "CEN-SAD"],
    "Sierra Leone": ["ECOWAS", "CEN-SAD"],
    "Togo": ["ECOWAS", "CEN-SAD"],
    "Botswana": ["SADC"],
    "Lesotho": ["SADC"],
    "Mozambique": ["SADC"],
    "Namibia": ["SADC"],
    "South Africa": ["SADC"],
    "Algeria": ["UMA", "CEN-SAD"],
    "Mauritania": ["UMA", "CEN-SAD"],
    "Morocco": ["UMA", "CEN-SAD"],
}

# (id, name, capital, population, area km2, region, gdp in USD billions)
DEFAULT_COUNTRIES: list[tuple[str, str, str, int, int, str, int]] = [
    ("dz", "Algeria", "Algiers", 44700000, 2381741, "North", 195),
    ("ao", "Angola", "Luanda", 35588000, 1246700, "Central", 94),
    ("bj", "Benin", "Porto-Novo", 13353000, 112622, "West", 17),
    ("bw", "Botswana", "Gaborone", 2630000, 581730, "South", 18),
    ("bf", "Burkina Faso", "Ouagadougou", 22673000, 272967, "West", 19),
    ("bi", "Burundi", "Gitega", 12889000, 27834, "East", 3),
    ("cm", "Cameroon", "Yaoundé", 28088000, 475442, "Central", 45),
    ("cv", "Cape Verde", "Praia", 594000, 4033, "West", 2),
    ("cf", "Central African Republic", "Bangui", 5579000, 622984, "Central", 2),
    ("td", "Chad", "N'Djamena", 17723000, 1284000, "Central", 11),
    ("km", "Comoros", "Moroni", 907000, 1862, "East", 1),
    ("cg", "Congo", "Brazzaville", 5970000, 342000, "Central", 11),
    ("cd", "DR Congo", "Kinshasa", 99010000, 2344858, "Central", 55),
    ("ci", "Côte d'Ivoire", "Yamoussoukro", 28088000, 322463, "West", 70),
    ("dj", "Djibouti", "Djibouti", 1120000, 23200, "East", 4),
    ("eg", "Egypt", "Cairo", 111000000, 1002450, "North", 469),
    ("gq", "Equatorial Guinea", "Malabo", 1674000, 28051, "Central", 10),
    ("er", "Eritrea", "Asmara", 3684000, 117600, "East", 2),
    ("sz", "Eswatini", "Mbabane", 1210000, 17364, "South", 4),
    ("et", "Ethiopia", "Addis Ababa", 123379000, 1104300, "East", 126),
    ("ga", "Gabon", "Libreville", 2388000, 267668, "Central", 19),
    ("gm", "Gambia", "Banjul", 2706000, 10689, "West", 2),
    ("gh", "Ghana", "Accra", 34121000, 238533, "West", 77),
    ("gn", "Guinea", "Conakry", 14191000, 245857, "West", 16),
    ("gw", "Guinea-Bissau", "Bissau", 2106000, 36125, "West", 2),
    ("ke", "Kenya", "Nairobi", 55100000, 580367, "East", 115),
    ("ls", "Lesotho", "Maseru", 2306000, 30355, "South", 2),
    ("lr", "Liberia", "Monrovia", 5418000, 111369, "West", 4),
    ("ly", "Libya", "Tripoli", 6888000, 1759540, "North", 25),
    ("mg", "Madagascar", "Antananarivo", 30325000, 587041, "East", 15),
    ("mw", "Malawi", "Lilongwe", 20931000, 118484, "East", 13),
    ("ml", "Mali", "Bamako", 22594000, 1240192, "West", 19),
    ("mr", "Mauritania", "Nouakchott", 4862000, 1030700, "West", 9),
    ("mu", "Mauritius", "Port Louis", 1300000, 2040, "East", 12),
    ("ma", "Morocco", "Rabat", 37840000, 446550, "North", 134),
    ("mz", "Mozambique", "Maputo", 33897000, 801590, "East", 16),
    ("na", "Namibia", "Windhoek", 2604000, 825615, "South", 11),
    ("ne", "Niger", "Niamey", 26207000, 1267000, "West", 16),
    ("ng", "Nigeria", "Abuja", 223804000, 923768, "West", 477),
    ("rw", "Rwanda", "Kigali", 13776000, 26338, "East", 13),
    ("st", "São Tomé and Príncipe", "São Tomé", 231000, 964, "Central", 1),
    ("sn", "Senegal", "Dakar", 17740000, 196722, "West", 28),
    ("sc", "Seychelles", "Victoria", 107000, 452, "East", 2),
    ("sl", "Sierra Leone", "Freetown", 8606000, 71740, "West", 4),
    ("so", "Somalia", "Mogadishu", 18143000, 637657, "East", 8),
    ("za", "South Africa", "Pretoria", 60604000, 1221037, "South", 380),
    ("ss", "South Sudan", "Juba", 11088000, 644329, "East", 3),
    ("sd", "Sudan", "Khartoum", 48109000, 1886068, "North", 35),
    ("tz", "Tanzania", "Dodoma", 65498000, 947303, "East", 75),
    ("tg", "Togo", "Lomé", 8848000, 56785, "West", 8),
    ("tn", "Tunisia", "Tunis", 12458000, 163610, "North", 47),
    ("ug", "Uganda", "Kampala", 48582000, 241550, "East", 45),
    ("zm", "Zambia", "Lusaka", 20017000, 752612, "South", 22),
    ("zw", "Zimbabwe", "Harare", 16320000, 390757, "South", 28),
]


def recs_for_country(country_name: str) -> list[str]:
    """Return the RECs a country belongs to (empty if unknown)."""
    return COUNTRY_RECS.get(country_name, [])


def rec_members(rec: str) -> list[str]:
    """Return the names of countries mapped to a REC."""
    return [name for name, recs in COUNTRY_RECS.items() if rec in recs]


def reference_payload() -> dict:
    """Everything the UI needs to build its pickers and legends."""
    return {
        "pillars": PILLARS,
        "project_regions": PROJECT_REGIONS,
        "project_stages": PROJECT_STAGES,
        "country_regions": [region.value for region in CountryRegion],
        "recs": [
            {"code": code, "name": name, "member_count": member_count}
            for code, (name, member_count) in REC_INFO.items()
        ],
        "country_recs": COUNTRY_RECS,
    }
