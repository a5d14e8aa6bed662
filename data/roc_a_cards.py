"""
ROC-A 附加题库（限制性无线电操作员证书）
不在 PSTAR 题库中的静态题目，作为 bonus 卡和部分应急事件的题源
每张卡固定在自己的 home phase 出现
"""

ROC_A_CARDS = [
    {
        "id": "roc-mayday-message-order",
        "phase": "enroute",
        "section_name": "ROC-A Distress Procedures",
        "context": "{callsign} is in distress and you key the mic.",
        "stem": "After the distress call, what is the correct order of the MAYDAY message?",
        "options": [
            "MAYDAY, callsign, position, nature of distress, intentions, other information.",
            "MAYDAY, callsign, nature of distress, position, other information, intentions.",
            "MAYDAY, callsign, intentions, position, nature of distress, other information.",
            "Callsign, MAYDAY, position, intentions, nature of distress, other information.",
        ],
        "correct": 2,
        "risk": 2,
        "critical": False,
        "explanation": "The message follows MAYDAY and callsign with the nature of distress, position, other useful information and the pilot's intentions.",
    },
    {
        "id": "roc-comm-priority",
        "phase": "enroute",
        "section_name": "ROC-A Distress Procedures",
        "context": "Several stations are trying to transmit at once.",
        "stem": "Which type of communication has absolute priority over all others?",
        "options": [
            "Urgency.",
            "Safety.",
            "Distress.",
            "Direction finding.",
        ],
        "correct": 3,
        "risk": 2,
        "critical": False,
        "explanation": "Distress traffic has priority over urgency, safety and all other communications.",
    },
    {
        "id": "roc-listen-before-transmit",
        "phase": "taxi_depart",
        "section_name": "ROC-A Operating Procedures",
        "context": "You are about to call {icao} Tower.",
        "stem": "Before transmitting on a frequency, an operator should:",
        "options": [
            "listen to make sure the frequency is not in use.",
            "transmit a test count.",
            "call the station twice to get its attention.",
            "increase the volume to maximum.",
        ],
        "correct": 1,
        "risk": 1,
        "critical": False,
        "explanation": "Listen first so you do not block another station's transmission.",
    },
    {
        "id": "roc-freq-pronunciation",
        "phase": "preflight",
        "section_name": "ROC-A Phraseology",
        "context": "You read back the Ground frequency for {callsign}.",
        "stem": "How is the frequency 121.9 MHz spoken?",
        "options": [
            "One twenty-one point nine.",
            "One two one decimal niner.",
            "One hundred twenty-one nine.",
            "Twelve nineteen.",
        ],
        "correct": 2,
        "risk": 1,
        "critical": False,
        "explanation": "Each digit is spoken separately, with DECIMAL for the point and NINER for nine.",
    },
    {
        "id": "roc-say-again",
        "phase": "arrival",
        "section_name": "ROC-A Phraseology",
        "context": "You missed the first part of Tower's landing instructions for Runway {runway}.",
        "stem": "To request a repeat of only the part before \"Runway\", you say:",
        "options": [
            "Repeat the first part.",
            "Say again all before Runway.",
            "Pardon, say again please.",
            "Negative, repeat.",
        ],
        "correct": 2,
        "risk": 1,
        "critical": False,
        "explanation": "SAY AGAIN ALL BEFORE and SAY AGAIN ALL AFTER request partial repeats. REPEAT is not used in this sense.",
    },
    {
        "id": "roc-readability-scale",
        "phase": "preflight",
        "section_name": "ROC-A Phraseology",
        "context": "{icao} Ground asks how you read them.",
        "stem": "A signal strength report of \"readable but with difficulty\" corresponds to:",
        "options": [
            "one.",
            "two.",
            "three.",
            "four.",
        ],
        "correct": 3,
        "risk": 1,
        "critical": False,
        "explanation": "One is unreadable, two readable now and then, three readable with difficulty, four readable, five perfectly readable.",
    },
]
