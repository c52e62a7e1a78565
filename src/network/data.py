"""Static station, route and interchange tables for the Addis Ababa taxi network."""

# Map centre (Meskel Square area)
ADDIS_CENTER = {"lat": 9.0305, "lng": 38.7486}

STATIONS_DATA = [
    {"id": "piazza", "am": "ፒያሳ", "en": "Piazza", "lat": 9.0375, "lng": 38.7495},
    {"id": "arba_kilo", "am": "አራት ኪሎ", "en": "Arat Kilo", "lat": 9.0360, "lng": 38.7610},
    {"id": "megnagna", "am": "መገናኛ", "en": "Megnagna", "lat": 9.0200, "lng": 38.7980},
    {"id": "bole", "am": "ቦሌ", "en": "Bole", "lat": 9.0067, "lng": 38.7845},
    {"id": "kazanchis", "am": "ካዛንቺስ", "en": "Kazanchis", "lat": 9.0205, "lng": 38.7660},
    {"id": "ayer_tena", "am": "አየር ጤና", "en": "Ayer Tena", "lat": 8.9800, "lng": 38.7200},
    {"id": "mexico", "am": "ሜክሲኮ", "en": "Mexico", "lat": 9.0040, "lng": 38.7450},
    {"id": "gofa", "am": "ጎፋ", "en": "Gofa", "lat": 8.9500, "lng": 38.7400},
    {"id": "kirkos", "am": "ቂርቆስ", "en": "Kirkos", "lat": 9.0080, "lng": 38.7610},
    {"id": "simrock", "am": "ሲምሮክ", "en": "Simrock", "lat": 8.9850, "lng": 38.8050},
    {"id": "summit", "am": "ሰሚት", "en": "Summit", "lat": 9.0600, "lng": 38.8300},
    {"id": "gerji", "am": "ገርጂ", "en": "Gerji", "lat": 9.0150, "lng": 38.8200},
    {"id": "22_mazoria", "am": "22 ማዞሪያ", "en": "22 Mazoria", "lat": 9.0450, "lng": 38.8000},
    {"id": "lebu", "am": "ለቡ", "en": "Lebu", "lat": 8.9500, "lng": 38.7700},
    {"id": "stadium", "am": "ስታዲየም", "en": "Stadium", "lat": 9.0100, "lng": 38.7550},
    {"id": "asco", "am": "አስኮ", "en": "Asco", "lat": 9.0250, "lng": 38.6900},
    {"id": "saris", "am": "ሳሪስ", "en": "Saris", "lat": 8.9400, "lng": 38.7900},
    {"id": "gotera", "am": "ጎተራ", "en": "Gotera", "lat": 8.9880, "lng": 38.7650},
    {"id": "michele", "am": "ሚካኤል", "en": "Michel", "lat": 9.0550, "lng": 38.7800},
    {"id": "lideta", "am": "ልደታ", "en": "Lideta", "lat": 9.0200, "lng": 38.7300},
    {"id": "cmc", "am": "ሲኤምሲ", "en": "CMC", "lat": 9.0550, "lng": 38.8250},
    {"id": "shiro_meda", "am": "ሽሮ ሜዳ", "en": "Shiro Meda", "lat": 9.0500, "lng": 38.7500},
    {"id": "kaliti", "am": "ቃሊቲ", "en": "Kaliti", "lat": 8.9150, "lng": 38.7950},
    {"id": "adey_abeba", "am": "አደይ አበባ", "en": "Adey Abeba", "lat": 8.9950, "lng": 38.7250},
    {"id": "balcha", "am": "ባልቻ", "en": "Balcha", "lat": 9.0150, "lng": 38.7400},
    {"id": "lafto", "am": "ላፍቶ", "en": "Lafto", "lat": 8.9700, "lng": 38.7400},
]

ROUTES_DATA = [
    {
        "id": 1,
        "name_am": "ፒያሳ - አየር ጤና",
        "name_en": "Piazza - Ayer Tena",
        "stations": ["piazza", "arba_kilo", "megnagna", "bole", "kazanchis", "ayer_tena"],
    },
    {
        "id": 2,
        "name_am": "ሜክሲኮ - ሰሚት",
        "name_en": "Mexico - Summit",
        "stations": ["mexico", "gofa", "kirkos", "simrock", "kazanchis", "summit"],
    },
    {
        "id": 3,
        "name_am": "ገርጂ - ለቡ",
        "name_en": "Gerji - Lebu",
        "stations": ["gerji", "22_mazoria", "kazanchis", "ayer_tena", "lebu"],
    },
    {
        "id": 4,
        "name_am": "ቂርቆስ - አራት ኪሎ",
        "name_en": "Kirkos - Arat Kilo",
        "stations": ["kirkos", "megnagna", "arba_kilo", "stadium"],
    },
    {
        "id": 5,
        "name_am": "ቦሌ - ስታዲየም",
        "name_en": "Bole - Stadium",
        "stations": ["bole", "megnagna", "stadium"],
    },
    {
        "id": 6,
        "name_am": "ቃሊቲ - ስታዲየም",
        "name_en": "Kaliti - Stadium",
        "stations": ["kaliti", "saris", "gotera", "stadium", "mexico"],
    },
    {
        "id": 7,
        "name_am": "ልደታ - ሽሮ ሜዳ",
        "name_en": "Lideta - Shiro Meda",
        "stations": ["lideta", "mexico", "balcha", "piazza", "shiro_meda", "arba_kilo"],
    },
    {
        "id": 8,
        "name_am": "አስኮ - አየር ጤና",
        "name_en": "Asco - Ayer Tena",
        "stations": ["asco", "adey_abeba", "lafto", "ayer_tena", "lebu"],
    },
    {
        "id": 9,
        "name_am": "ሲኤምሲ - ሚካኤል",
        "name_en": "CMC - Michel",
        "stations": ["cmc", "summit", "22_mazoria", "megnagna", "michele"],
    },
    {
        "id": 10,
        "name_am": "ካዛንቺስ - ጎፋ",
        "name_en": "Kazanchis - Gofa",
        "stations": ["kazanchis", "kirkos", "gotera", "gofa", "lebu"],
    },
    {
        "id": 11,
        "name_am": "ቦሌ - ሳሪስ",
        "name_en": "Bole - Saris",
        "stations": ["bole", "simrock", "saris", "kaliti"],
    },
]

# Transfer points, in the order the transfer search visits them
INTERCHANGE_STATION_IDS = [
    "kazanchis",
    "ayer_tena",
    "megnagna",
    "arba_kilo",
    "bole",
    "mexico",
    "stadium",
    "gotera",
    "piazza",
    "summit",
    "lebu",
    "saris",
]
