"""
航段简报数据
加拿大机场列表 + METAR 模板（报文片段、解码结果、解码测验题）
"""

AIRPORTS = [
    {"icao": "CYOO", "name": "Oshawa", "runways": ["12/30"], "elevation": 460, "has_atc": True},
    {"icao": "CYKZ", "name": "Buttonville", "runways": ["15/33", "03/21"], "elevation": 650, "has_atc": True},
    {"icao": "CYRP", "name": "Carp", "runways": ["10/28"], "elevation": 382, "has_atc": False},
    {"icao": "CYTZ", "name": "Toronto Island", "runways": ["08/26", "06/24"], "elevation": 252, "has_atc": True},
    {"icao": "CYKF", "name": "Waterloo", "runways": ["08/26", "14/32"], "elevation": 1055, "has_atc": True},
    {"icao": "CYRO", "name": "Rockcliffe", "runways": ["09/27"], "elevation": 188, "has_atc": False},
    {"icao": "CYPQ", "name": "Peterborough", "runways": ["09/27", "17/35"], "elevation": 628, "has_atc": False},
    {"icao": "CNB7", "name": "Kawartha Lakes", "runways": ["13/31"], "elevation": 882, "has_atc": False},
    {"icao": "CYQA", "name": "Muskoka", "runways": ["18/36", "09/27"], "elevation": 925, "has_atc": False},
    {"icao": "CZBA", "name": "Burlington", "runways": ["14/32"], "elevation": 602, "has_atc": False},
    {"icao": "CYGK", "name": "Kingston", "runways": ["01/19", "07/25"], "elevation": 305, "has_atc": True},
    {"icao": "CYHU", "name": "St-Hubert", "runways": ["06L/24R", "06R/24L"], "elevation": 90, "has_atc": True},
]

# 呼号字母（不含 I 和 O）
CALLSIGN_LETTERS = "ABCDEFGHJKLMNPQRSTUVWXYZ"

CRUISE_ALTITUDES = ["2,500", "3,500", "4,500", "5,500"]

# ============================================================================
# METAR 模板
# ceiling_ft 为 None 表示没有云底高（无 BKN/OVC 层）
# ============================================================================
METAR_TEMPLATES = [
    {
        "parts": {
            "wind": "27008KT", "vis": "15SM", "wx": "", "clouds": "FEW055 SCT080",
            "temp_dew": "22/14", "altimeter": "A3005", "rmk": "RMK CI1SC2 SLP176",
        },
        "decoded": {
            "wind_dir": 270, "wind_speed": 8, "gust_speed": None, "vis_sm": 15,
            "ceiling_ft": None, "cloud_layers": "Few at 5,500, scattered at 8,000",
            "temp_c": 22, "dew_c": 14, "altimeter_inhg": "30.05",
            "phenomena": "None", "flight_category": "VFR",
        },
        "wx_question": {
            "stem": "What does \"FEW055 SCT080\" mean?",
            "options": [
                "Few clouds at 550 feet, scattered at 800 feet.",
                "Few clouds at 5,500 feet, scattered at 8,000 feet.",
                "Fog at 5,500 feet, overcast at 8,000 feet.",
                "Few clouds at 55,000 feet, scattered at 80,000 feet.",
            ],
            "correct": 2,
            "explanation": "Cloud heights are in hundreds of feet AGL. FEW and SCT layers do not form a ceiling.",
        },
    },
    {
        "parts": {
            "wind": "15012KT", "vis": "6SM", "wx": "-RA", "clouds": "BKN035 OVC050",
            "temp_dew": "14/11", "altimeter": "A2978", "rmk": "RMK SC5SC3 SLP085",
        },
        "decoded": {
            "wind_dir": 150, "wind_speed": 12, "gust_speed": None, "vis_sm": 6,
            "ceiling_ft": 3500, "cloud_layers": "Broken at 3,500, overcast at 5,000",
            "temp_c": 14, "dew_c": 11, "altimeter_inhg": "29.78",
            "phenomena": "Light rain", "flight_category": "MVFR",
        },
        "wx_question": {
            "stem": "What is the ceiling in this METAR?",
            "options": [
                "5,000 feet AGL.",
                "3,500 feet AGL.",
                "No ceiling. Conditions are VFR.",
                "6 statute miles.",
            ],
            "correct": 2,
            "explanation": "The ceiling is the lowest BKN or OVC layer. BKN035 is broken at 3,500 ft AGL.",
        },
    },
    {
        "parts": {
            "wind": "32015G22KT", "vis": "8SM", "wx": "", "clouds": "SCT045 BKN070",
            "temp_dew": "18/08", "altimeter": "A2992", "rmk": "RMK SC4AC2 SLP132",
        },
        "decoded": {
            "wind_dir": 320, "wind_speed": 15, "gust_speed": 22, "vis_sm": 8,
            "ceiling_ft": 7000, "cloud_layers": "Scattered at 4,500, broken at 7,000",
            "temp_c": 18, "dew_c": 8, "altimeter_inhg": "29.92",
            "phenomena": "None", "flight_category": "VFR",
        },
        "wx_question": {
            "stem": "What does \"32015G22KT\" tell you?",
            "options": [
                "Wind from 320 degrees at 15 knots, gusting to 22.",
                "Wind from 032 degrees at 15 knots, gusting to 22.",
                "Wind from 320 degrees at 22 knots, steady.",
                "Variable wind between 150 and 220 degrees at 32 knots.",
            ],
            "correct": 1,
            "explanation": "Direction (true), speed, then G and the gust speed, all in knots.",
        },
    },
    {
        "parts": {
            "wind": "00000KT", "vis": "20SM", "wx": "", "clouds": "FEW100",
            "temp_dew": "26/10", "altimeter": "A3018", "rmk": "RMK CI1 SLP223",
        },
        "decoded": {
            "wind_dir": 0, "wind_speed": 0, "gust_speed": None, "vis_sm": 20,
            "ceiling_ft": None, "cloud_layers": "Few at 10,000",
            "temp_c": 26, "dew_c": 10, "altimeter_inhg": "30.18",
            "phenomena": "None", "flight_category": "VFR",
        },
        "wx_question": {
            "stem": "The wind is reported as \"00000KT\". What does this mean?",
            "options": [
                "Wind data is missing.",
                "Wind is calm.",
                "Wind is variable at less than 3 knots.",
                "Wind is from the north at 0 knots.",
            ],
            "correct": 2,
            "explanation": "00000KT means calm. Light variable wind would be reported as VRB.",
        },
    },
    {
        "parts": {
            "wind": "09010KT", "vis": "3SM", "wx": "BR", "clouds": "OVC012",
            "temp_dew": "08/07", "altimeter": "A2968", "rmk": "RMK ST8 SLP054",
        },
        "decoded": {
            "wind_dir": 90, "wind_speed": 10, "gust_speed": None, "vis_sm": 3,
            "ceiling_ft": 1200, "cloud_layers": "Overcast at 1,200",
            "temp_c": 8, "dew_c": 7, "altimeter_inhg": "29.68",
            "phenomena": "Mist", "flight_category": "IFR",
        },
        "wx_question": {
            "stem": "\"BR\" in the METAR means what?",
            "options": [
                "Heavy rain.",
                "Blowing snow.",
                "Mist (visibility 5/8 SM to 6 SM).",
                "Drizzle.",
            ],
            "correct": 3,
            "explanation": "BR (brume) is mist, reported with visibility from 5/8 SM to 6 SM. Below that it becomes FG.",
        },
    },
    {
        "parts": {
            "wind": "21014G20KT", "vis": "10SM", "wx": "", "clouds": "BKN040 BKN120",
            "temp_dew": "20/12", "altimeter": "A2985", "rmk": "RMK SC5AC2 SLP110",
        },
        "decoded": {
            "wind_dir": 210, "wind_speed": 14, "gust_speed": 20, "vis_sm": 10,
            "ceiling_ft": 4000, "cloud_layers": "Broken at 4,000, broken at 12,000",
            "temp_c": 20, "dew_c": 12, "altimeter_inhg": "29.85",
            "phenomena": "None", "flight_category": "VFR",
        },
        "wx_question": {
            "stem": "With a ceiling of BKN040, can you fly VFR in controlled airspace?",
            "options": [
                "No. VFR requires at least a 5,000 foot ceiling in controlled airspace.",
                "Yes, staying 500 ft below the cloud with 3 SM visibility.",
                "No. You need Special VFR.",
                "Yes. There is no minimum cloud clearance for VFR.",
            ],
            "correct": 2,
            "explanation": "Controlled airspace VFR needs 3 SM and 500 ft below cloud. A 4,000 ft ceiling leaves room.",
        },
    },
    {
        "parts": {
            "wind": "18008KT", "vis": "15SM", "wx": "", "clouds": "SCT060",
            "temp_dew": "24/16", "altimeter": "A3002", "rmk": "RMK CU3 SLP168",
        },
        "decoded": {
            "wind_dir": 180, "wind_speed": 8, "gust_speed": None, "vis_sm": 15,
            "ceiling_ft": None, "cloud_layers": "Scattered at 6,000",
            "temp_c": 24, "dew_c": 16, "altimeter_inhg": "30.02",
            "phenomena": "None", "flight_category": "VFR",
        },
        "wx_question": {
            "stem": "The altimeter setting is A3002. What does this mean?",
            "options": [
                "Set your altimeter to 30.02 inches of mercury.",
                "The field elevation is 3,002 feet.",
                "The pressure altitude is 3,002 feet.",
                "QNH is 3002 hectopascals.",
            ],
            "correct": 1,
            "explanation": "The A prefix means an altimeter setting in inches of mercury: 30.02 inHg.",
        },
    },
    {
        "parts": {
            "wind": "30018G28KT", "vis": "5SM", "wx": "-TSRA", "clouds": "SCT025CB BKN045 OVC080",
            "temp_dew": "19/17", "altimeter": "A2962", "rmk": "RMK CB5SC2AC1 PRESRR SLP036",
        },
        "decoded": {
            "wind_dir": 300, "wind_speed": 18, "gust_speed": 28, "vis_sm": 5,
            "ceiling_ft": 4500, "cloud_layers": "Scattered CB at 2,500, broken at 4,500, overcast at 8,000",
            "temp_c": 19, "dew_c": 17, "altimeter_inhg": "29.62",
            "phenomena": "Light thunderstorm with rain", "flight_category": "MVFR",
        },
        "wx_question": {
            "stem": "You see \"-TSRA\" and \"SCT025CB\". What should concern you most?",
            "options": [
                "Nothing. The rain is light so it's fine to fly.",
                "Cumulonimbus cloud and a thunderstorm with rain are present. Avoid the area.",
                "TS means the turbulence is smooth and CB means clear below.",
                "The minus sign means the thunderstorm is departing.",
            ],
            "correct": 2,
            "explanation": "CB is cumulonimbus and TS is thunderstorm. Even a light thunderstorm brings severe turbulence and wind shear.",
        },
    },
    {
        "parts": {
            "wind": "12005KT", "vis": "1/2SM", "wx": "FG", "clouds": "VV002",
            "temp_dew": "06/06", "altimeter": "A2985", "rmk": "RMK FG8 SLP112",
        },
        "decoded": {
            "wind_dir": 120, "wind_speed": 5, "gust_speed": None, "vis_sm": 0.5,
            "ceiling_ft": 200, "cloud_layers": "Vertical visibility 200 feet",
            "temp_c": 6, "dew_c": 6, "altimeter_inhg": "29.85",
            "phenomena": "Fog", "flight_category": "LIFR",
        },
        "wx_question": {
            "stem": "Visibility is reported as \"1/2SM\". What does this mean?",
            "options": [
                "Visibility is 12 statute miles.",
                "Visibility is one-half statute mile.",
                "Visibility varies between 1 and 2 statute miles.",
                "Visibility is 2 statute miles in one direction.",
            ],
            "correct": 2,
            "explanation": "Fractional visibility uses standard fractions. Half a mile in fog is LIFR.",
        },
    },
    {
        "parts": {
            "wind": "16015KT", "vis": "2SM", "wx": "RA", "clouds": "OVC015",
            "temp_dew": "12/10", "altimeter": "A2962", "rmk": "RMK ST8 SLP040",
        },
        "decoded": {
            "wind_dir": 160, "wind_speed": 15, "gust_speed": None, "vis_sm": 2,
            "ceiling_ft": 1500, "cloud_layers": "Overcast at 1,500",
            "temp_c": 12, "dew_c": 10, "altimeter_inhg": "29.62",
            "phenomena": "Rain", "flight_category": "IFR",
        },
        "wx_question": {
            "stem": "With 2SM in rain and overcast at 1,500 feet, what is the main concern?",
            "options": [
                "Visibility is above VFR minima so there is no concern.",
                "Conditions are already IFR and rain can drop them further toward LIFR.",
                "2SM is only a concern at night.",
                "Visibility in rain always improves as the front passes.",
            ],
            "correct": 2,
            "explanation": "2 SM with a 1,500 ft ceiling is IFR, and heavier rain can lower it further.",
        },
    },
    {
        "parts": {
            "wind": "02012KT", "vis": "3SM", "wx": "-SN", "clouds": "OVC018",
            "temp_dew": "M03/M05", "altimeter": "A2948", "rmk": "RMK SC8 SLP998",
        },
        "decoded": {
            "wind_dir": 20, "wind_speed": 12, "gust_speed": None, "vis_sm": 3,
            "ceiling_ft": 1800, "cloud_layers": "Overcast at 1,800",
            "temp_c": -3, "dew_c": -5, "altimeter_inhg": "29.48",
            "phenomena": "Light snow", "flight_category": "MVFR",
        },
        "wx_question": {
            "stem": "The weather group \"-SN\" means what?",
            "options": [
                "Heavy snow.",
                "Snow showers ending.",
                "Light snow.",
                "Snow mixed with freezing rain.",
            ],
            "correct": 3,
            "explanation": "Minus is light, no prefix is moderate, plus is heavy. -SN is light snow.",
        },
    },
    {
        "parts": {
            "wind": "22018G26KT", "vis": "1SM", "wx": "+RA", "clouds": "BKN008 OVC020",
            "temp_dew": "16/15", "altimeter": "A2952", "rmk": "RMK SC5SC3 SLP020",
        },
        "decoded": {
            "wind_dir": 220, "wind_speed": 18, "gust_speed": 26, "vis_sm": 1,
            "ceiling_ft": 800, "cloud_layers": "Broken at 800, overcast at 2,000",
            "temp_c": 16, "dew_c": 15, "altimeter_inhg": "29.52",
            "phenomena": "Heavy rain", "flight_category": "IFR",
        },
        "wx_question": {
            "stem": "What does the \"+\" in \"+RA\" signify?",
            "options": [
                "Rain is increasing in coverage.",
                "Rain is of heavy intensity.",
                "Rain is above freezing.",
                "Rain is intermittent.",
            ],
            "correct": 2,
            "explanation": "The plus prefix means heavy intensity. Heavy rain here has cut visibility to 1 SM.",
        },
    },
]
