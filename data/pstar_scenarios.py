"""
PSTAR 情景改写
把原始考题的题干和选项改写成飞行中的决策情景，正确选项编号保持不变
没有改写的题目使用原题干 + flight context
"""

SCENARIO_OVERLAYS = {
    # ============================================================================
    # 起飞前
    # ============================================================================
    "5.01": {
        "stem": "You open the cockpit of {callsign} to start your document check. Which set is complete for this flight?",
        "options": [
            "C of A, Registration, Technical Records, Crew Licences, Flight Manual, Journey Log",
            "C of A, Registration, Technical Records, Crew Licences, Type Certificate, Insurance",
            "C of A, Registration, Crew Licences, Flight Manual, Type Certificate, Journey Log",
            "C of A, Registration, Crew Licences, Flight Manual, Journey Log, Insurance",
        ],
    },
    "5.11": {
        "stem": "You scan the panel of {callsign}. For day VFR, which instruments are required alongside the magnetic compass?",
        "options": [
            "Airspeed indicator, altimeter, and a timepiece.",
            "Airspeed indicator, attitude indicator, and heading indicator.",
            "Airspeed indicator, altimeter, vertical speed, turn and bank, and a timepiece.",
            "Attitude indicator, vertical speed, turn and bank, and heading indicator.",
        ],
    },
    "8.01": {
        "stem": "Before driving to {icao}, you realize you've had a bad head cold all week. What must you do?",
        "options": [
            "Advise the Minister of Transport.",
            "Do not fly as a crew member.",
            "Forward your licence to the Regional Aviation Medical Officer.",
            "Fly only if a backup crew member is available.",
        ],
    },
    "8.12": {
        "stem": "You're 42 years old. You pull out your medical certificate to check the expiry. How long is it valid?",
        "options": [
            "12 months.",
            "24 months.",
            "36 months.",
            "48 months.",
        ],
    },
    "8.13": {
        "stem": "Your friend, who is 28, asks how long their student permit medical lasts. What do you tell them?",
        "options": [
            "72 months.",
            "60 months.",
            "48 months.",
            "24 months.",
        ],
    },
    "9.02": {
        "stem": "Before your day VFR cross-country out of {icao}, you calculate fuel. Beyond reaching your destination, how much reserve is required?",
        "options": [
            "45 minutes at normal cruising speed.",
            "30 minutes at normal cruising speed.",
            "Enough to reach an alternate plus 45 minutes.",
            "Enough to reach an alternate plus 30 minutes.",
        ],
    },

    # ============================================================================
    # 滑行 / 起飞
    # ============================================================================
    "2.01": {
        "stem": "Your radio has failed on the ground at {icao}. The tower flashes a series of green lights at you. What does that mean?",
        "options": [
            "In flight: cleared to land. On ground: cleared to taxi.",
            "In flight: return for landing. On ground: cleared for take-off.",
            "In flight: return for landing. On ground: cleared to taxi.",
            "In flight: cleared to land. On ground: cleared for take-off.",
        ],
    },
    "2.02": {
        "stem": "You're on the ramp with no radio. The tower points a steady red light at {callsign}. What does it mean?",
        "options": [
            "In flight: give way and circle. On ground: stop.",
            "In flight: give way and circle. On ground: taxi clear of landing area.",
            "In flight: airport unsafe. On ground: taxi clear of landing area.",
            "In flight: airport unsafe. On ground: stop.",
        ],
    },
    "4.01": {
        "stem": "Ground cleared you to taxi to Runway {runway}. You reach two solid and two dashed yellow lines. Where do you stop?",
        "options": [
            "On the dashed side, at the dashed lines.",
            "On the solid side, before crossing the solid lines.",
            "Past the marking, clear of the taxiway.",
            "Only if you see traffic on final.",
        ],
    },

    # ============================================================================
    # 航路
    # ============================================================================
    "3.18": {
        "stem": "The engine quits over trees and a field is your only option. {callsign} needs help now. How do you open the call?",
        "options": [
            "MAYDAY, MAYDAY, MAYDAY.",
            "PAN PAN, PAN PAN, PAN PAN.",
            "SECURITE, SECURITE, SECURITE.",
            "EMERGENCY, EMERGENCY, EMERGENCY.",
        ],
    },
    "12.02": {
        "stem": "The cloud base is dropping as you approach the {icao} control zone. What VFR minima must you keep?",
        "options": [
            "1 SM, clear of cloud.",
            "3 SM, 500 ft below and 1 mile horizontally from cloud.",
            "2 SM, 1,000 ft below cloud.",
            "5 SM, 1,000 ft below and 2 miles horizontally from cloud.",
        ],
    },

    # ============================================================================
    # 进近 / 着陆
    # ============================================================================
    "6.05": {
        "stem": "Your radio died ten miles out from {icao}. How do you cross the field before joining?",
        "options": [
            "At circuit height, then join downwind.",
            "500 feet above circuit height, watching for light signals.",
            "At 1,000 feet AGL, then join straight-in.",
            "At 2,000 feet AGL, holding overhead.",
        ],
    },
}
