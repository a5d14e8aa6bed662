"""
应急事件配置
航段规划时按概率注入，每个航段最多一个事件

触发后：
- 出现应急公告卡（确认时扣减时钟 timer_penalty 秒，风险 +immediate_risk）
- 播放应急通话
- 从 question_pool（PSTAR 题 ID）和 bonus_pool（ROC-A 卡 ID）中抽取应急题
- 最后一张叙事卡展示处置结果
"""

EMERGENCY_EVENTS = [
    {
        "id": "engine-rough",
        "name": "Rough Running Engine",
        "trigger_phases": ["enroute"],
        "announcement": "The engine starts running rough. RPM fluctuates and you feel vibration through the airframe. Time to act.",
        "panel_label": "EMERGENCY - ENGINE ROUGH",
        "panel_sub": "Troubleshoot and decide",
        "timer_penalty": 120,
        "immediate_risk": 1,
        "question_pool": ["11.01", "3.18", "3.19", "6.13", "9.05"],
        "bonus_pool": ["roc-mayday-message-order", "roc-comm-priority"],
        "radio_lines": [
            ("pilot", "Toronto Centre, {callsign}, rough running engine, request vectors to nearest aerodrome."),
            ("atc", "{callsign}, roger, nearest aerodrome is {icao}, one five miles, heading two seven zero. Say intentions."),
            ("pilot", "{callsign}, proceeding direct {icao}, may need to declare PAN PAN."),
        ],
        "transition_texts": [
            "The engine coughs again. Carb heat on, mixture rich. You scan for a field below.",
            "RPM is still unstable. You run the emergency checklist. Stay calm.",
            "You're losing altitude slowly. Eyes scanning for the nearest runway.",
        ],
        "resolution": "The engine smooths out after applying carb heat. Probable carb icing. You continue to the nearest aerodrome as a precaution.",
    },
    {
        "id": "comm-failure",
        "name": "Radio Failure",
        "trigger_phases": ["enroute", "arrival"],
        "announcement": "Static fills your headset. You try transmitting and get nothing back. You've lost your radio. You're NORDO.",
        "panel_label": "EMERGENCY - NORDO",
        "panel_sub": "No radio, light gun signals",
        "timer_penalty": 90,
        "immediate_risk": 1,
        "question_pool": ["2.01", "2.02", "2.03", "2.04", "2.05", "6.05", "6.18"],
        "bonus_pool": [],
        "radio_lines": [
            ("atc", "..."),
            ("pilot", "(You transmit but hear only static. The radio is dead. Squawk 7600.)"),
        ],
        "transition_texts": [
            "Silence in the headset. You're on your own now. Squawk 7600 and head for the field.",
            "No radio means light gun signals. Remember your colours.",
            "You overfly the field 500 feet above circuit height to check the signals.",
        ],
        "resolution": "You enter the circuit, watch for light gun signals, and land safely on a steady green. A technician finds a loose headset connector.",
    },
    {
        "id": "alternator-failure",
        "name": "Alternator Failure",
        "trigger_phases": ["enroute"],
        "announcement": "The low-voltage light illuminates. Your alternator has failed and you're on battery only, with limited time before you lose avionics.",
        "panel_label": "EMERGENCY - ALT FAIL",
        "panel_sub": "Battery power only",
        "timer_penalty": 150,
        "immediate_risk": 1,
        "question_pool": ["5.07", "5.11", "11.01", "3.08", "6.22"],
        "bonus_pool": ["roc-listen-before-transmit", "roc-freq-pronunciation"],
        "radio_lines": [
            ("pilot", "Toronto Centre, {callsign}, alternator failure, shedding electrical load, request direct {icao}."),
            ("atc", "{callsign}, cleared direct {icao}, advise if you require assistance."),
        ],
        "transition_texts": [
            "You switch off everything non-essential. The ammeter shows a steady discharge.",
            "Battery time is ticking away. Keep the radio calls short.",
            "You plan for a no-flap landing in case the electrics quit entirely.",
        ],
        "resolution": "You land at {icao} with the battery nearly flat. A broken alternator belt is found on the ramp.",
    },
    {
        "id": "passenger-ill",
        "name": "Passenger Medical",
        "trigger_phases": ["enroute"],
        "announcement": "Your passenger turns grey, clutches their chest and says they feel terrible. You need to get them on the ground.",
        "panel_label": "URGENCY - PASSENGER ILL",
        "panel_sub": "Divert and get help",
        "timer_penalty": 120,
        "immediate_risk": 1,
        "question_pool": ["3.19", "8.02", "8.06", "9.05", "5.04"],
        "bonus_pool": ["roc-comm-priority", "roc-mayday-message-order"],
        "radio_lines": [
            ("pilot", "PAN PAN, PAN PAN, PAN PAN. Toronto Centre, {callsign}, passenger with chest pain, diverting to {icao}, request medical services on arrival."),
            ("atc", "{callsign}, Toronto Centre, roger PAN PAN. {icao} advised, ambulance will meet you."),
        ],
        "transition_texts": [
            "Your passenger is breathing fast. You open the vents and talk them through it.",
            "You turn toward {icao} and run the numbers for the diversion.",
            "The passenger is still conscious. Keep flying the aircraft.",
        ],
        "resolution": "Paramedics meet you on the apron at {icao}. Your passenger was having a panic attack and recovers quickly.",
    },
    {
        "id": "unexpected-weather",
        "name": "Deteriorating Weather",
        "trigger_phases": ["enroute"],
        "announcement": "The cloud ahead has lowered to the treetops and rain is closing in. The forecast was wrong.",
        "panel_label": "CAUTION - WEATHER",
        "panel_sub": "Turn back or divert",
        "timer_penalty": 90,
        "immediate_risk": 1,
        "question_pool": ["12.02", "12.03", "12.04", "13.02", "13.06", "6.13", "6.14"],
        "bonus_pool": [],
        "radio_lines": [
            ("pilot", "Toronto Terminal, {callsign}, encountering lowering ceilings, request vectors back to {icao}."),
            ("atc", "{callsign}, turn right heading one eight zero, {icao} is reporting two thousand broken."),
        ],
        "transition_texts": [
            "You start a gentle turn away from the wall of rain.",
            "The horizon is getting hard to see. Stay on the instruments if you have to.",
            "Visibility is improving behind you. The turn was the right call.",
        ],
        "resolution": "You break out into better weather and land back at {icao}. Your instructor nods: the best pilots know when to turn around.",
    },
    {
        "id": "door-open",
        "name": "Door Open on Take-off",
        "trigger_phases": ["taxi_depart"],
        "announcement": "BANG. The passenger door pops open just after rotation. Wind roars through the cabin.",
        "panel_label": "ABNORMAL - DOOR OPEN",
        "panel_sub": "Fly the aircraft first",
        "timer_penalty": 60,
        "immediate_risk": 1,
        "question_pool": ["6.01", "6.11", "6.12", "10.04", "10.05"],
        "bonus_pool": [],
        "radio_lines": [
            ("pilot", "{icao} Tower, {callsign}, door open, request to return and land Runway {runway}."),
            ("atc", "{callsign}, {icao} Tower, cleared to land Runway {runway}, wind calm."),
        ],
        "transition_texts": [
            "It's loud, but the aircraft still flies normally. Aviate first.",
            "You resist the urge to reach for the door and keep climbing to circuit height.",
            "Your passenger is holding the armrest. You tell them everything is under control.",
        ],
        "resolution": "You fly a normal circuit and land. The door is latched properly on the ground, and this time you check it twice.",
    },
    {
        "id": "bird-strike",
        "name": "Bird Strike",
        "trigger_phases": ["taxi_depart", "arrival"],
        "announcement": "A gull slams into the windscreen with a loud thud. There's a crack across your side.",
        "panel_label": "EMERGENCY - BIRD STRIKE",
        "panel_sub": "Assess and land",
        "timer_penalty": 60,
        "immediate_risk": 1,
        "question_pool": ["14.03", "14.04", "11.05", "4.08", "6.07"],
        "bonus_pool": [],
        "radio_lines": [
            ("pilot", "{icao} Tower, {callsign}, bird strike, cracked windscreen, request immediate landing Runway {runway}."),
            ("atc", "{callsign}, {icao} Tower, Runway {runway}, cleared to land, emergency vehicles standing by."),
        ],
        "transition_texts": [
            "The windscreen is holding. You slow down to reduce the load on it.",
            "You check the engine instruments. Everything is still in the green.",
            "Forward visibility is reduced. You look out the side window on final.",
        ],
        "resolution": "You land safely. The crack is only in the outer layer of the windscreen, and you file a wildlife strike report.",
    },
    {
        "id": "electrical-smell",
        "name": "Electrical Burning Smell",
        "trigger_phases": ["enroute"],
        "announcement": "You smell hot insulation. A thin wisp of smoke curls up from behind the panel.",
        "panel_label": "EMERGENCY - SMOKE",
        "panel_sub": "Master off, land ASAP",
        "timer_penalty": 150,
        "immediate_risk": 1,
        "question_pool": ["5.07", "11.01", "3.18", "5.11", "12.05"],
        "bonus_pool": ["roc-mayday-message-order", "roc-comm-priority"],
        "radio_lines": [
            ("pilot", "MAYDAY, MAYDAY, MAYDAY. Toronto Centre, {callsign}, {callsign}, {callsign}. Electrical fire, smoke in the cockpit. Shutting down all electrics. Landing at {icao}."),
            ("atc", "MAYDAY {callsign}, Toronto Centre, received MAYDAY. {icao} is one zero miles, heading one eight zero. Emergency services alerted."),
        ],
        "transition_texts": [
            "Master switch off. Everything goes dark and quiet. The smoke clears with the vents open.",
            "No electrics means no radio, no transponder, no GPS. Aviate, navigate, communicate.",
            "You can see the field ahead. No radio for landing clearance, so watch for light gun signals.",
        ],
        "resolution": "You land without electrical power, guided by light gun signals. A chafed wire behind the panel caused the short.",
    },
]
