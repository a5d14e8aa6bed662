"""
PSTAR 题库数据配置
学生飞行员航空规章考试（TP 11919）题目、答案表与出处引用

题目本身不带答案，答案统一放在 ANSWER_KEY 中，由 seed 阶段写入数据库
"""

# ============================================================================
# 章节
# ============================================================================
SECTIONS = {
    1: "Collision Avoidance",
    2: "Light Signals",
    3: "Radiotelephony",
    4: "Aerodrome Markings and Lighting",
    5: "Aircraft Documents and Equipment",
    6: "Rules of the Air",
    7: "Wake Turbulence and Wind",
    8: "Medical Requirements",
    9: "Flight Planning and Fuel",
    10: "Passengers",
    11: "Emergencies and ELT",
    12: "VFR Weather Minima",
    13: "Special VFR and Airspace",
    14: "Accidents, Incidents and Wildlife",
}

# ============================================================================
# 题目
# phase: preflight / taxi_depart / enroute / arrival
# risk: 1-3，critical: 答错即坠毁（bust）
# ============================================================================
QUESTIONS = [
    # ---------------------------------------------------------------- 1 避让
    {
        "id": "1.01", "section": 1, "phase": "enroute", "risk": 2, "critical": False,
        "context": "Level at {callsign}'s cruise altitude, you spot a Cherokee converging from your right.",
        "stem": "When two aircraft are converging at approximately the same altitude, which one must give way?",
        "options": [
            "The aircraft that has the other on its right.",
            "The aircraft that has the other on its left.",
            "The faster of the two aircraft.",
            "The aircraft at the higher altitude.",
        ],
        "explanation": "The aircraft that has the other on its right gives way. Look right, yield right.",
    },
    {
        "id": "1.02", "section": 1, "phase": "enroute", "risk": 3, "critical": True,
        "context": "A twin is approaching head-on at your altitude.",
        "stem": "When two aircraft are approaching head-on and there is danger of collision, each pilot must:",
        "options": [
            "climb immediately.",
            "descend immediately.",
            "alter heading to the right.",
            "alter heading to the left.",
        ],
        "explanation": "Both aircraft alter heading to the right so that they pass left side to left side.",
    },
    {
        "id": "1.03", "section": 1, "phase": "enroute", "risk": 1, "critical": False,
        "context": "You are catching up to a slower aircraft on the same track.",
        "stem": "An aircraft that is overtaking another aircraft shall:",
        "options": [
            "pass above the other aircraft.",
            "alter heading to the right.",
            "alter heading to the left.",
            "pass below the other aircraft.",
        ],
        "explanation": "The aircraft being overtaken has the right of way; the overtaking aircraft keeps clear by altering heading to the right.",
    },
    {
        "id": "1.04", "section": 1, "phase": "enroute", "risk": 1, "critical": False,
        "context": "A glider and a hot-air balloon are both visible ahead.",
        "stem": "A power-driven, heavier-than-air aircraft must give way to:",
        "options": [
            "airships only.",
            "gliders only.",
            "other power-driven aircraft on its left.",
            "airships, gliders and balloons.",
        ],
        "explanation": "Power-driven aeroplanes give way to airships, gliders and balloons, which are less manoeuvrable.",
    },
    {
        "id": "1.05", "section": 1, "phase": "enroute", "risk": 2, "critical": False,
        "context": "Two aircraft are approaching the same aerodrome for landing.",
        "stem": "When two aircraft are approaching an aerodrome for the purpose of landing, the right of way belongs to:",
        "options": [
            "the aircraft at the lower altitude.",
            "the aircraft at the higher altitude.",
            "the faster aircraft.",
            "the aircraft on the left.",
        ],
        "explanation": "The aircraft at the lower altitude has the right of way, but it must not cut in front of another on final.",
    },
    # ---------------------------------------------------------------- 2 灯光信号
    {
        "id": "2.01", "section": 2, "phase": "taxi_depart", "risk": 2, "critical": False,
        "context": "Your radio has failed on the ramp at {icao}.",
        "stem": "A series of green flashes directed at an aircraft means:",
        "options": [
            "In flight: cleared to land. On ground: cleared to taxi.",
            "In flight: return for landing. On ground: cleared for take-off.",
            "In flight: return for landing. On ground: cleared to taxi.",
            "In flight: cleared to land. On ground: cleared for take-off.",
        ],
        "explanation": "Flashing green: return for landing in flight, cleared to taxi on the ground.",
    },
    {
        "id": "2.02", "section": 2, "phase": "taxi_depart", "risk": 3, "critical": True,
        "context": "You are taxiing NORDO toward Runway {runway}.",
        "stem": "A steady red light directed at an aircraft means:",
        "options": [
            "In flight: give way to other aircraft and continue circling. On ground: stop.",
            "In flight: give way and continue circling. On ground: taxi clear of the landing area.",
            "In flight: aerodrome unsafe, do not land. On ground: taxi clear of the landing area.",
            "In flight: aerodrome unsafe, do not land. On ground: stop.",
        ],
        "explanation": "Steady red: give way and keep circling in flight, stop on the ground.",
    },
    {
        "id": "2.03", "section": 2, "phase": "taxi_depart", "risk": 2, "critical": False,
        "context": "The tower is flashing a light at you as you approach the runway.",
        "stem": "A series of red flashes directed at an aircraft means:",
        "options": [
            "In flight: give way and continue circling. On ground: stop.",
            "In flight: aerodrome unsafe, do not land. On ground: taxi clear of the landing area in use.",
            "In flight: return for landing. On ground: return to starting point.",
            "In flight: cleared to land. On ground: cleared to taxi.",
        ],
        "explanation": "Flashing red: aerodrome unsafe in flight, taxi clear of the landing area on the ground.",
    },
    {
        "id": "2.04", "section": 2, "phase": "taxi_depart", "risk": 2, "critical": False,
        "context": "Holding short of Runway {runway} with no radio, you watch the tower.",
        "stem": "A steady green light directed at an aircraft means:",
        "options": [
            "In flight: return for landing. On ground: cleared to taxi.",
            "In flight: give way and continue circling. On ground: stop.",
            "In flight: aerodrome unsafe. On ground: taxi clear.",
            "In flight: cleared to land. On ground: cleared for take-off.",
        ],
        "explanation": "Steady green: cleared to land in flight, cleared for take-off on the ground.",
    },
    {
        "id": "2.05", "section": 2, "phase": "taxi_depart", "risk": 1, "critical": False,
        "context": "Still NORDO, you see a white light flashing toward you on the apron.",
        "stem": "A series of white flashes directed at an aircraft on the ground means:",
        "options": [
            "Return to starting point on the aerodrome.",
            "Cleared to taxi.",
            "Stop immediately.",
            "Taxi clear of the landing area in use.",
        ],
        "explanation": "Flashing white on the ground means return to your starting point on the aerodrome.",
    },
    {
        "id": "2.06", "section": 2, "phase": "arrival", "risk": 1, "critical": False,
        "context": "On short final to Runway {runway}, you see the runway lights flashing.",
        "stem": "Flashing runway or taxiway lights at a controlled aerodrome mean that:",
        "options": [
            "the aerodrome is closed to all traffic.",
            "you are cleared to land.",
            "vehicles and pedestrians must vacate the runway or taxiway immediately.",
            "the lighting system is being tested.",
        ],
        "explanation": "Flashing runway or taxiway lights instruct vehicles and pedestrians to vacate the manoeuvring area immediately.",
    },
    # ---------------------------------------------------------------- 3 无线电
    {
        "id": "3.01", "section": 3, "phase": "preflight", "risk": 1, "critical": False,
        "context": "You rehearse your initial call to {icao} Ground.",
        "stem": "The phonetic word for the letter \"V\" is:",
        "options": [
            "Victory.",
            "Vector.",
            "Victor.",
            "Vodka.",
        ],
        "explanation": "The ICAO phonetic alphabet uses Victor for V.",
    },
    {
        "id": "3.02", "section": 3, "phase": "preflight", "risk": 1, "critical": False,
        "context": "After your radio check, Ground tells you they read you five.",
        "stem": "On the readability scale, \"five\" means the transmission is:",
        "options": [
            "unreadable.",
            "readable now and then.",
            "readable but with difficulty.",
            "perfectly readable.",
        ],
        "explanation": "Readability runs from one (unreadable) to five (perfectly readable).",
    },
    {
        "id": "3.08", "section": 3, "phase": "enroute", "risk": 1, "critical": False,
        "context": "Cruising with only one radio, you decide what to monitor.",
        "stem": "Pilots should maintain a listening watch on which frequency whenever practicable?",
        "options": [
            "126.7 MHz.",
            "123.2 MHz.",
            "121.5 MHz.",
            "122.75 MHz.",
        ],
        "explanation": "121.5 MHz is the emergency frequency and should be monitored whenever practicable.",
    },
    {
        "id": "3.10", "section": 3, "phase": "taxi_depart", "risk": 3, "critical": True,
        "context": "Ground instructs {callsign} to hold short of Runway {runway}.",
        "stem": "Which ATC instruction must always be read back in full?",
        "options": [
            "Traffic information.",
            "A hold short instruction.",
            "The ATIS identifier.",
            "A wind check.",
        ],
        "explanation": "Hold short instructions must be read back to confirm the pilot will not enter the runway.",
    },
    {
        "id": "3.12", "section": 3, "phase": "taxi_depart", "risk": 1, "critical": False,
        "context": "Tower asks you to report ready at the threshold.",
        "stem": "The word \"WILCO\" means:",
        "options": [
            "I have received all of your last transmission.",
            "Repeat your message.",
            "Your message is understood and will be complied with.",
            "Wait, I will call you back.",
        ],
        "explanation": "WILCO is short for \"will comply\" and confirms both understanding and intent to comply.",
    },
    {
        "id": "3.15", "section": 3, "phase": "enroute", "risk": 1, "critical": False,
        "context": "Terminal passes you a frequency change.",
        "stem": "The word \"ROGER\" means:",
        "options": [
            "I have received all of your last transmission.",
            "I will comply with your instruction.",
            "Yes.",
            "Say again.",
        ],
        "explanation": "ROGER only acknowledges receipt. It is not a readback and it does not mean yes.",
    },
    {
        "id": "3.18", "section": 3, "phase": "enroute", "risk": 3, "critical": True,
        "context": "You are in serious trouble and need help now.",
        "stem": "Which radiotelephony signal indicates that an aircraft is threatened by grave and imminent danger and requires immediate assistance?",
        "options": [
            "MAYDAY, MAYDAY, MAYDAY.",
            "PAN PAN, PAN PAN, PAN PAN.",
            "SECURITE, SECURITE, SECURITE.",
            "EMERGENCY, EMERGENCY, EMERGENCY.",
        ],
        "explanation": "MAYDAY spoken three times is the distress signal. It has priority over all other traffic.",
    },
    {
        "id": "3.19", "section": 3, "phase": "enroute", "risk": 2, "critical": False,
        "context": "A passenger needs medical attention but the aircraft is not in danger.",
        "stem": "Which signal indicates an urgent condition concerning the safety of an aircraft or a person on board, not requiring immediate assistance?",
        "options": [
            "MAYDAY, MAYDAY, MAYDAY.",
            "PAN PAN, PAN PAN, PAN PAN.",
            "SECURITE, SECURITE, SECURITE.",
            "URGENT, URGENT, URGENT.",
        ],
        "explanation": "PAN PAN is the urgency signal. It ranks below distress and above all other traffic.",
    },
    {
        "id": "3.20", "section": 3, "phase": "enroute", "risk": 2, "critical": False,
        "context": "Things are going wrong and ATC has not yet answered.",
        "stem": "To indicate an emergency condition without radio contact, you should set your transponder to:",
        "options": [
            "1200.",
            "7500.",
            "7600.",
            "7700.",
        ],
        "explanation": "Code 7700 signals an emergency. 7600 is communication failure and 7500 is unlawful interference.",
    },
    # ---------------------------------------------------------------- 4 机场标志
    {
        "id": "4.01", "section": 4, "phase": "taxi_depart", "risk": 3, "critical": True,
        "context": "Approaching Runway {runway} you see two solid and two dashed yellow lines across the taxiway.",
        "stem": "At a runway holding position marking, you must stop:",
        "options": [
            "on the dashed-line side, at the dashed lines.",
            "on the solid-line side, before crossing the solid lines.",
            "past the marking, clear of the taxiway.",
            "only if another aircraft is on final.",
        ],
        "explanation": "Hold on the solid-line side until cleared. The dashed side is the runway side.",
    },
    {
        "id": "4.03", "section": 4, "phase": "taxi_depart", "risk": 1, "critical": False,
        "context": "You line up on Runway {runway} and glance at the heading indicator.",
        "stem": "Runway numbers are derived from:",
        "options": [
            "the magnetic direction of the runway rounded to the nearest ten degrees.",
            "the true direction of the runway rounded to the nearest degree.",
            "the order in which the runways were built.",
            "the prevailing wind direction.",
        ],
        "explanation": "Runway numbers are the magnetic heading divided by ten (true heading in the northern domestic airspace).",
    },
    {
        "id": "4.05", "section": 4, "phase": "taxi_depart", "risk": 2, "critical": False,
        "context": "A large white X is painted near the threshold of the crossing runway.",
        "stem": "A white X on a runway indicates that the runway is:",
        "options": [
            "the active runway.",
            "restricted to helicopters.",
            "closed.",
            "used for touch-and-go landings only.",
        ],
        "explanation": "A white or yellow X marks a closed runway or taxiway.",
    },
    {
        "id": "4.08", "section": 4, "phase": "taxi_depart", "risk": 1, "critical": False,
        "context": "The windsock beside Runway {runway} is standing straight out.",
        "stem": "A fully extended wind sock indicates a wind speed of approximately:",
        "options": [
            "5 knots or more.",
            "8 knots or more.",
            "10 knots or more.",
            "15 knots or more.",
        ],
        "explanation": "A standard wind sock is fully extended at about 15 knots.",
    },
    {
        "id": "4.10", "section": 4, "phase": "taxi_depart", "risk": 1, "critical": False,
        "context": "Taxiing at dusk, you follow the edge lights to the runway.",
        "stem": "Taxiway edge lights are:",
        "options": [
            "white.",
            "blue.",
            "green.",
            "yellow.",
        ],
        "explanation": "Taxiway edge lights are blue. Runway edge lights are white.",
    },
    # ---------------------------------------------------------------- 5 文件设备
    {
        "id": "5.01", "section": 5, "phase": "preflight", "risk": 2, "critical": False,
        "context": "You open the aircraft to do your document check.",
        "stem": "Which documents must be carried on board a privately registered aircraft on a domestic flight?",
        "options": [
            "C of A, Registration, Technical Records, Crew Licences, Flight Manual, Journey Log",
            "C of A, Registration, Technical Records, Crew Licences, Type Certificate, Insurance",
            "C of A, Registration, Crew Licences, Flight Manual, Type Certificate, Journey Log",
            "C of A, Registration, Crew Licences, Flight Manual, Journey Log, Insurance",
        ],
        "explanation": "Certificate of airworthiness, registration, crew licences, flight manual, journey log and proof of liability insurance.",
    },
    {
        "id": "5.04", "section": 5, "phase": "preflight", "risk": 1, "critical": False,
        "context": "Your passenger asks where the first aid kit and fire extinguisher are.",
        "stem": "Who is responsible for briefing passengers on the location and use of emergency equipment?",
        "options": [
            "The aircraft owner.",
            "The flight instructor.",
            "The pilot-in-command.",
            "The aerodrome operator.",
        ],
        "explanation": "The pilot-in-command must ensure passengers are briefed before take-off.",
    },
    {
        "id": "5.07", "section": 5, "phase": "preflight", "risk": 1, "critical": False,
        "context": "You write the emergency frequency on your kneeboard.",
        "stem": "The international VHF aeronautical emergency frequency is:",
        "options": [
            "118.0 MHz.",
            "121.5 MHz.",
            "126.7 MHz.",
            "243.0 MHz.",
        ],
        "explanation": "121.5 MHz is the civil VHF emergency frequency. 243.0 MHz is the military UHF one.",
    },
    {
        "id": "5.09", "section": 5, "phase": "preflight", "risk": 1, "critical": False,
        "context": "Before engine start you turn to your passenger.",
        "stem": "Before take-off, the pilot-in-command must ensure that each passenger is briefed on:",
        "options": [
            "the use of safety belts, emergency exits and emergency equipment.",
            "the route and cruise altitude.",
            "the aircraft's maintenance history.",
            "the weather at the destination.",
        ],
        "explanation": "The safety briefing covers safety belts, exits, emergency equipment and smoking restrictions.",
    },
    {
        "id": "5.11", "section": 5, "phase": "preflight", "risk": 2, "critical": False,
        "context": "You scan the instrument panel before start.",
        "stem": "For day VFR flight in a power-driven aircraft, which instruments are required in addition to a magnetic compass?",
        "options": [
            "Airspeed indicator, altimeter, and a timepiece.",
            "Airspeed indicator, attitude indicator, and heading indicator.",
            "Airspeed indicator, altimeter, vertical speed, turn and bank, and a timepiece.",
            "Attitude indicator, vertical speed, turn and bank, and heading indicator.",
        ],
        "explanation": "Day VFR requires an airspeed indicator, an altimeter, a magnetic compass and a timepiece.",
    },
    # ---------------------------------------------------------------- 6 飞行规则
    {
        "id": "6.01", "section": 6, "phase": "taxi_depart", "risk": 2, "critical": False,
        "context": "Your passenger asks who is in charge once the engine is running.",
        "stem": "Who is responsible for the operation and safety of the aircraft during flight time?",
        "options": [
            "The pilot-in-command.",
            "The air traffic controller.",
            "The aircraft owner.",
            "The most senior licence holder on board.",
        ],
        "explanation": "The pilot-in-command has final authority and responsibility for the flight.",
    },
    {
        "id": "6.05", "section": 6, "phase": "arrival", "risk": 2, "critical": False,
        "context": "You are arriving at {icao} without a working radio.",
        "stem": "A NORDO aircraft arriving at a controlled aerodrome should cross the field at:",
        "options": [
            "circuit height and join downwind.",
            "500 feet above circuit height to observe traffic and signals.",
            "1,000 feet AGL and join straight-in.",
            "2,000 feet AGL and hold overhead.",
        ],
        "explanation": "Cross 500 ft above circuit height, watch for light signals, then join the circuit.",
    },
    {
        "id": "6.07", "section": 6, "phase": "enroute", "risk": 2, "critical": False,
        "context": "Your route passes over a town.",
        "stem": "Over a built-up area, an aeroplane must fly at least:",
        "options": [
            "500 feet above the highest obstacle.",
            "1,000 feet AGL.",
            "1,000 feet above the highest obstacle within 2,000 feet horizontally.",
            "2,000 feet above the highest obstacle within 1,000 feet horizontally.",
        ],
        "explanation": "Over built-up areas the minimum is 1,000 ft above the highest obstacle within 2,000 ft.",
    },
    {
        "id": "6.08", "section": 6, "phase": "arrival", "risk": 1, "critical": False,
        "context": "You set up to join the circuit at {icao}.",
        "stem": "Unless otherwise specified, the standard circuit height for a propeller aeroplane is:",
        "options": [
            "1,000 feet above aerodrome elevation.",
            "500 feet above aerodrome elevation.",
            "1,500 feet above aerodrome elevation.",
            "2,000 feet above aerodrome elevation.",
        ],
        "explanation": "Standard circuit height is 1,000 ft above aerodrome elevation for propeller aircraft.",
    },
    {
        "id": "6.09", "section": 6, "phase": "arrival", "risk": 2, "critical": False,
        "context": "The {icao} ATIS now reports conditions below VFR minima.",
        "stem": "To enter a control zone when weather is below VFR minima, a VFR pilot must:",
        "options": [
            "declare an emergency.",
            "obtain a Special VFR authorization from ATC.",
            "climb above the cloud and wait.",
            "enter as planned and land as soon as possible.",
        ],
        "explanation": "Special VFR must be requested and authorized by ATC before entering the zone.",
    },
    {
        "id": "6.10", "section": 6, "phase": "arrival", "risk": 1, "critical": False,
        "context": "No circuit direction is published for {icao}.",
        "stem": "Unless otherwise specified, all turns in the aerodrome traffic circuit are made:",
        "options": [
            "to the right.",
            "into wind.",
            "as directed by other traffic.",
            "to the left.",
        ],
        "explanation": "Standard circuits are left-hand unless published or instructed otherwise.",
    },
    {
        "id": "6.11", "section": 6, "phase": "taxi_depart", "risk": 3, "critical": True,
        "context": "You reach the hold line for Runway {runway} at a controlled airport.",
        "stem": "At a controlled aerodrome, before entering the runway for take-off, you must have:",
        "options": [
            "a taxi clearance only.",
            "visual confirmation that the runway is clear.",
            "a take-off clearance or an instruction to line up.",
            "completed a radio check with Ground.",
        ],
        "explanation": "A taxi clearance to the runway does not authorize entering it. You need take-off or line-up authorization.",
    },
    {
        "id": "6.12", "section": 6, "phase": "arrival", "risk": 2, "critical": False,
        "context": "The wind at {icao} is gusting 12 knots above the mean.",
        "stem": "When landing in gusty winds, it is good practice to:",
        "options": [
            "use full flaps and the lowest approach speed.",
            "add half the gust factor to the normal approach speed.",
            "land with a tailwind component.",
            "reduce power to idle on downwind.",
        ],
        "explanation": "Adding half the gust factor keeps a safe margin above the stall during lulls.",
    },
    {
        "id": "6.13", "section": 6, "phase": "enroute", "risk": 2, "critical": False,
        "context": "The cloud ahead is lower than forecast.",
        "stem": "Who is ultimately responsible for deciding whether a VFR flight can continue in deteriorating weather?",
        "options": [
            "The pilot-in-command.",
            "The flight service specialist.",
            "The area controller.",
            "The aircraft owner.",
        ],
        "explanation": "VFR weather decisions rest with the pilot-in-command.",
    },
    {
        "id": "6.14", "section": 6, "phase": "enroute", "risk": 1, "critical": False,
        "context": "You are heading 090 magnetic more than 3,000 feet AGL.",
        "stem": "Flying VFR above 3,000 feet AGL on a magnetic track of 000 to 179 degrees, the appropriate cruising altitude is:",
        "options": [
            "even thousands plus 500 feet.",
            "odd thousands plus 500 feet.",
            "even thousands.",
            "odd thousands.",
        ],
        "explanation": "Eastbound VFR flies odd thousands plus 500 ft, westbound even thousands plus 500 ft.",
    },
    {
        "id": "6.18", "section": 6, "phase": "enroute", "risk": 2, "critical": False,
        "context": "Your radio has gone quiet.",
        "stem": "If two-way communication fails, the transponder should be set to:",
        "options": [
            "1200.",
            "7500.",
            "7600.",
            "7700.",
        ],
        "explanation": "7600 indicates communication failure.",
    },
    {
        "id": "6.22", "section": 6, "phase": "enroute", "risk": 2, "critical": False,
        "context": "Your route clips the edge of Class C airspace.",
        "stem": "Before entering Class C airspace, a VFR pilot must:",
        "options": [
            "obtain a clearance from ATC.",
            "only monitor the ATC frequency.",
            "file an IFR flight plan.",
            "climb above 12,500 feet.",
        ],
        "explanation": "VFR flight in Class C requires an ATC clearance and a transponder.",
    },
    # ---------------------------------------------------------------- 7 尾流与风
    {
        "id": "7.06", "section": 7, "phase": "arrival", "risk": 2, "critical": False,
        "context": "A Boeing 737 just landed on Runway {runway} ahead of you.",
        "stem": "When landing behind a larger aircraft on the same runway, you should:",
        "options": [
            "stay at or above its flight path and land beyond its touchdown point.",
            "stay below its flight path and land before its touchdown point.",
            "fly a flat approach and land short.",
            "land at the same point it touched down.",
        ],
        "explanation": "Wake vortices sink. Stay above the larger aircraft's path and touch down beyond its point.",
    },
    {
        "id": "7.09", "section": 7, "phase": "taxi_depart", "risk": 2, "critical": False,
        "context": "A Dash 8 departs Runway {runway} just before you.",
        "stem": "When departing behind a larger aircraft, you should plan to:",
        "options": [
            "lift off at the same point as the larger aircraft.",
            "lift off before the larger aircraft's rotation point and climb above its path.",
            "lift off after its rotation point and stay below its path.",
            "delay take-off by exactly 30 seconds.",
        ],
        "explanation": "Be airborne before its rotation point and climb above or upwind of its flight path.",
    },
    {
        "id": "7.10", "section": 7, "phase": "taxi_depart", "risk": 1, "critical": False,
        "context": "You are waiting for wake turbulence to dissipate.",
        "stem": "Wake turbulence is most severe when the generating aircraft is:",
        "options": [
            "light, dirty and fast.",
            "heavy, dirty and fast.",
            "heavy, clean and slow.",
            "light, clean and slow.",
        ],
        "explanation": "Heavy, clean and slow aircraft produce the strongest wingtip vortices.",
    },
    {
        "id": "7.12", "section": 7, "phase": "arrival", "risk": 2, "critical": False,
        "context": "There is a strong crosswind across Runway {runway}.",
        "stem": "During a crosswind landing using the sideslip method, you lower the:",
        "options": [
            "downwind wing and use opposite rudder.",
            "downwind wing and use same rudder.",
            "nose and increase power.",
            "upwind wing and use opposite rudder.",
        ],
        "explanation": "Lower the upwind wing into the wind and keep the nose straight with opposite rudder.",
    },
    {
        "id": "7.15", "section": 7, "phase": "taxi_depart", "risk": 1, "critical": False,
        "context": "Taxiing with a strong quartering tailwind from the left.",
        "stem": "When taxiing with a quartering tailwind, the controls should be positioned with:",
        "options": [
            "elevator down and the aileron on the upwind side down.",
            "elevator up and the aileron on the upwind side up.",
            "elevator neutral and ailerons neutral.",
            "elevator up and the aileron on the upwind side down.",
        ],
        "explanation": "Dive away from a tailwind: elevator down and the upwind aileron down.",
    },
    # ---------------------------------------------------------------- 8 体检
    {
        "id": "8.01", "section": 8, "phase": "preflight", "risk": 2, "critical": False,
        "context": "You have had a head cold all week.",
        "stem": "A flight crew member who is aware of a physical disability that could impair their ability must:",
        "options": [
            "advise the Minister of Transport.",
            "not act as a crew member.",
            "forward their licence to the Regional Aviation Medical Officer.",
            "fly only with a second pilot on board.",
        ],
        "explanation": "A crew member must not fly while aware of any condition that makes them unfit.",
    },
    {
        "id": "8.02", "section": 8, "phase": "preflight", "risk": 3, "critical": True,
        "context": "You were at a party last night.",
        "stem": "No person shall act as a crew member within how many hours after consuming an alcoholic beverage?",
        "options": [
            "6 hours.",
            "8 hours.",
            "12 hours.",
            "24 hours.",
        ],
        "explanation": "The regulatory minimum is 12 hours, and only if no longer under the influence.",
    },
    {
        "id": "8.06", "section": 8, "phase": "preflight", "risk": 1, "critical": False,
        "context": "Your passenger looks pale and is sweating.",
        "stem": "A passenger becomes airsick in turbulence. The best immediate action is to:",
        "options": [
            "climb to a higher altitude.",
            "open the fresh air vents and have them keep their head still and eyes on the horizon.",
            "give them something to eat.",
            "turn back immediately and declare an emergency.",
        ],
        "explanation": "Fresh air, a still head and a distant visual reference relieve motion sickness.",
    },
    {
        "id": "8.12", "section": 8, "phase": "preflight", "risk": 1, "critical": False,
        "context": "You check the expiry on your medical certificate.",
        "stem": "For a student pilot permit holder aged 40 or over, the medical certificate is valid for:",
        "options": [
            "12 months.",
            "24 months.",
            "36 months.",
            "48 months.",
        ],
        "explanation": "At 40 and older the validity period is 24 months.",
    },
    {
        "id": "8.13", "section": 8, "phase": "preflight", "risk": 1, "critical": False,
        "context": "A younger student asks about their medical.",
        "stem": "For a student pilot permit holder under age 40, the medical certificate is valid for:",
        "options": [
            "72 months.",
            "60 months.",
            "48 months.",
            "24 months.",
        ],
        "explanation": "Under 40 the validity period is 60 months.",
    },
    # ---------------------------------------------------------------- 9 计划与燃油
    {
        "id": "9.01", "section": 9, "phase": "preflight", "risk": 2, "critical": False,
        "context": "A helicopter student at {icao} is fuelling for a day VFR flight.",
        "stem": "For a day VFR flight in a helicopter, the fuel reserve beyond the destination must be:",
        "options": [
            "45 minutes at normal cruise.",
            "enough to fly to an alternate, then 45 minutes.",
            "20 minutes at normal cruise.",
            "enough to fly to an alternate, then 20 minutes.",
        ],
        "explanation": "Day VFR helicopter reserve is 20 minutes at normal cruising speed.",
    },
    {
        "id": "9.02", "section": 9, "phase": "preflight", "risk": 2, "critical": False,
        "context": "You calculate fuel for your day VFR trip from {icao}.",
        "stem": "For a day VFR flight in an aeroplane, the fuel reserve beyond the destination must be:",
        "options": [
            "45 minutes at normal cruising speed.",
            "30 minutes at normal cruising speed.",
            "enough to reach an alternate plus 45 minutes.",
            "enough to reach an alternate plus 30 minutes.",
        ],
        "explanation": "Day VFR aeroplanes must carry fuel to destination plus 30 minutes at normal cruise.",
    },
    {
        "id": "9.03", "section": 9, "phase": "preflight", "risk": 1, "critical": False,
        "context": "You are deciding whether to file anything for today's flight.",
        "stem": "A flight plan or flight itinerary is required for a VFR flight when flying:",
        "options": [
            "25 NM or more from the departure aerodrome.",
            "only in sparsely settled areas.",
            "only when landing at another aerodrome.",
            "on every flight.",
        ],
        "explanation": "A VFR flight plan or itinerary is required beyond 25 NM from the departure aerodrome.",
    },
    {
        "id": "9.05", "section": 9, "phase": "enroute", "risk": 2, "critical": False,
        "context": "You will not reach the destination on your flight plan.",
        "stem": "When a VFR flight deviates from its filed flight plan, the pilot must:",
        "options": [
            "close the flight plan after landing.",
            "file a new flight plan before take-off on the next leg.",
            "do nothing until arrival.",
            "notify an ATS unit as soon as practicable.",
        ],
        "explanation": "Changes to a filed flight plan must be reported to ATS as soon as practicable.",
    },
    {
        "id": "9.07", "section": 9, "phase": "preflight", "risk": 1, "critical": False,
        "context": "You file a VFR flight plan before departure.",
        "stem": "If a VFR flight plan is not closed, search and rescue action begins:",
        "options": [
            "one hour after the ETA.",
            "24 hours after the ETA.",
            "immediately at the ETA.",
            "12 hours after departure.",
        ],
        "explanation": "Unless another time is specified, SAR is alerted one hour after the ETA for a flight plan.",
    },
    # ---------------------------------------------------------------- 10 乘客
    {
        "id": "10.04", "section": 10, "phase": "taxi_depart", "risk": 1, "critical": False,
        "context": "Taxiing out, your passenger unbuckles to reach the back seat.",
        "stem": "Passengers must have their safety belts fastened:",
        "options": [
            "only during turbulence.",
            "during movement on the surface, take-off and landing, and whenever the pilot directs.",
            "only during take-off.",
            "only when the seat belt sign is installed.",
        ],
        "explanation": "Safety belts are required during surface movement, take-off, landing and when directed.",
    },
    {
        "id": "10.05", "section": 10, "phase": "taxi_depart", "risk": 2, "critical": False,
        "context": "The cabin door pops open on climb-out from Runway {runway}.",
        "stem": "If a cabin door opens in flight, the first priority is to:",
        "options": [
            "fly the aircraft.",
            "close the door immediately.",
            "declare a MAYDAY.",
            "slow to stall speed.",
        ],
        "explanation": "An open door is noisy but rarely dangerous. Fly the aircraft, then return and land.",
    },
    # ---------------------------------------------------------------- 11 应急
    {
        "id": "11.01", "section": 11, "phase": "enroute", "risk": 2, "critical": False,
        "context": "You are preparing for a forced landing.",
        "stem": "In an emergency where a forced landing is likely, the ELT should be:",
        "options": [
            "left in the armed position only.",
            "activated immediately.",
            "activated only after landing.",
            "removed from the aircraft.",
        ],
        "explanation": "Activate the ELT manually as soon as an emergency develops so searchers are alerted early.",
    },
    {
        "id": "11.03", "section": 11, "phase": "enroute", "risk": 1, "critical": False,
        "context": "You hear an ELT signal on 121.5 MHz in your own headset.",
        "stem": "If your ELT is activated accidentally, you should:",
        "options": [
            "switch it off and say nothing.",
            "leave it running until landing.",
            "switch it off and notify the nearest ATS unit.",
            "remove the battery.",
        ],
        "explanation": "Accidental activations must be reported so SAR resources are not launched.",
    },
    {
        "id": "11.05", "section": 11, "phase": "taxi_depart", "risk": 2, "critical": False,
        "context": "A bird hits the windscreen just after lift-off.",
        "stem": "After a bird strike during climb-out, the pilot should first:",
        "options": [
            "declare a MAYDAY.",
            "turn back immediately at low altitude.",
            "maintain control of the aircraft and assess the damage.",
            "shut down the engine.",
        ],
        "explanation": "Aviate first. Keep control, assess, then decide whether to return.",
    },
    {
        "id": "11.06", "section": 11, "phase": "arrival", "risk": 2, "critical": False,
        "context": "A thunderstorm is building near {icao}.",
        "stem": "A thunderstorm near the destination should be avoided by at least:",
        "options": [
            "2 NM.",
            "5 NM.",
            "10 NM.",
            "20 NM.",
        ],
        "explanation": "Severe thunderstorms should be avoided by 20 NM. Hold or divert rather than land under one.",
    },
    {
        "id": "11.07", "section": 11, "phase": "arrival", "risk": 2, "critical": False,
        "context": "You are descending toward an anvil cloud.",
        "stem": "Flying beneath the anvil of a thunderstorm exposes the aircraft to:",
        "options": [
            "hail and severe turbulence.",
            "smooth air and improved visibility.",
            "only light rain.",
            "no hazards if below 3,000 feet.",
        ],
        "explanation": "Hail can fall from the anvil miles from the core, with severe turbulence nearby.",
    },
    # ---------------------------------------------------------------- 12 目视气象
    {
        "id": "12.02", "section": 12, "phase": "enroute", "risk": 3, "critical": True,
        "context": "You are VFR in controlled airspace and the cloud is lowering.",
        "stem": "The minimum VFR flight visibility and cloud clearance in controlled airspace is:",
        "options": [
            "1 SM, clear of cloud.",
            "3 SM, 500 ft vertically and 1 mile horizontally from cloud.",
            "2 SM, 1,000 ft vertically from cloud.",
            "5 SM, 1,000 ft vertically and 2 miles horizontally from cloud.",
        ],
        "explanation": "Controlled airspace VFR: 3 SM visibility, 500 ft below cloud and 1 mile horizontally.",
    },
    {
        "id": "12.03", "section": 12, "phase": "enroute", "risk": 2, "critical": False,
        "context": "You are at 1,500 feet AGL in uncontrolled airspace by day.",
        "stem": "Day VFR in uncontrolled airspace at or above 1,000 feet AGL requires:",
        "options": [
            "1 SM visibility, 500 ft vertically and 2,000 ft horizontally from cloud.",
            "3 SM visibility, clear of cloud.",
            "2 SM visibility, clear of cloud.",
            "1 SM visibility, clear of cloud.",
        ],
        "explanation": "Above 1,000 ft AGL uncontrolled: 1 SM by day, 500 ft vertical, 2,000 ft horizontal.",
    },
    {
        "id": "12.04", "section": 12, "phase": "enroute", "risk": 2, "critical": False,
        "context": "You descend below 1,000 feet AGL in uncontrolled airspace to stay clear of cloud.",
        "stem": "Day VFR in uncontrolled airspace below 1,000 feet AGL requires:",
        "options": [
            "3 SM visibility, 500 ft below cloud.",
            "1 SM visibility, 500 ft below cloud.",
            "2 SM visibility, clear of cloud.",
            "5 SM visibility, clear of cloud.",
        ],
        "explanation": "Below 1,000 ft AGL uncontrolled by day: 2 SM visibility and clear of cloud.",
    },
    {
        "id": "12.05", "section": 12, "phase": "enroute", "risk": 3, "critical": False,
        "context": "You have inadvertently flown into cloud.",
        "stem": "After inadvertent entry into cloud, the most effective action for a VFR pilot is usually to:",
        "options": [
            "descend rapidly to find the ground.",
            "climb until on top.",
            "continue on course and hope it clears.",
            "make a gentle 180-degree turn on instruments.",
        ],
        "explanation": "A shallow, coordinated 180-degree turn on instruments returns you to the VMC you just left.",
    },
    # ---------------------------------------------------------------- 13 特殊目视
    {
        "id": "13.02", "section": 13, "phase": "enroute", "risk": 3, "critical": True,
        "context": "Your destination zone is reporting 2 SM in mist.",
        "stem": "Special VFR flight within a control zone may only be conducted:",
        "options": [
            "when authorized by ATC.",
            "at night.",
            "by pilots holding an instrument rating.",
            "when the ceiling is at least 1,000 feet.",
        ],
        "explanation": "Special VFR always requires an ATC authorization.",
    },
    {
        "id": "13.03", "section": 13, "phase": "enroute", "risk": 2, "critical": False,
        "context": "ATC asks whether you can accept Special VFR.",
        "stem": "The minimum flight visibility for an aeroplane operating Special VFR is:",
        "options": [
            "1/2 SM.",
            "1 SM.",
            "2 SM.",
            "3 SM.",
        ],
        "explanation": "Aeroplanes need at least 1 SM flight visibility for Special VFR.",
    },
    {
        "id": "13.04", "section": 13, "phase": "enroute", "risk": 2, "critical": False,
        "context": "You are cleared Special VFR into the zone.",
        "stem": "When operating Special VFR, the aircraft must:",
        "options": [
            "remain 500 feet below cloud.",
            "remain above 1,000 feet AGL.",
            "remain clear of cloud and in sight of the surface.",
            "remain on an IFR clearance.",
        ],
        "explanation": "Special VFR requires remaining clear of cloud and in sight of the surface.",
    },
    {
        "id": "13.05", "section": 13, "phase": "arrival", "risk": 2, "critical": False,
        "context": "Approaching the {icao} control zone, the ATIS reports visibility 2 SM.",
        "stem": "When weather in a control zone is below VFR minima, a VFR pilot wishing to enter must:",
        "options": [
            "enter and maintain VFR cloud clearances.",
            "enter at 500 ft AGL.",
            "wait for the ATIS to be updated.",
            "request and receive a Special VFR authorization.",
        ],
        "explanation": "Entry below VFR minima requires a Special VFR authorization.",
    },
    {
        "id": "13.06", "section": 13, "phase": "arrival", "risk": 1, "critical": False,
        "context": "The {icao} METAR shows SCT008 BKN015 OVC040.",
        "stem": "A ceiling is defined as the height of the lowest layer of cloud reported as:",
        "options": [
            "broken or overcast, or the vertical visibility into an obscuration.",
            "scattered, broken or overcast.",
            "any cloud layer.",
            "overcast only.",
        ],
        "explanation": "Ceiling is the lowest BKN or OVC layer, or vertical visibility.",
    },
    {
        "id": "13.07", "section": 13, "phase": "arrival", "risk": 1, "critical": False,
        "context": "You are approaching an MF area around {icao}.",
        "stem": "When inbound to an aerodrome with a mandatory frequency, you must report:",
        "options": [
            "only when joining the circuit.",
            "before entering the MF area, normally 5 minutes prior.",
            "only when on final.",
            "after landing only.",
        ],
        "explanation": "Report before entering the MF area, normally 5 minutes prior, then on joining the circuit.",
    },
    {
        "id": "13.08", "section": 13, "phase": "arrival", "risk": 1, "critical": False,
        "context": "The uncontrolled aerodrome ahead has no traffic reported.",
        "stem": "The recommended way to join the circuit at an uncontrolled aerodrome is to:",
        "options": [
            "join straight-in on final.",
            "join on base.",
            "cross overhead above circuit height and join downwind or mid-downwind.",
            "join on the upwind leg below circuit height.",
        ],
        "explanation": "Crossing overhead above circuit height lets you see the wind indicator and traffic before joining.",
    },
    # ---------------------------------------------------------------- 14 事故与野生动物
    {
        "id": "14.01", "section": 14, "phase": "arrival", "risk": 1, "critical": False,
        "context": "A friend damaged their propeller landing at {icao}.",
        "stem": "A reportable aviation accident must be reported to the TSB:",
        "options": [
            "within 30 days.",
            "within 7 days.",
            "only if someone was injured.",
            "as soon as possible and by the quickest means available.",
        ],
        "explanation": "Reportable accidents go to the Transportation Safety Board as soon as possible.",
    },
    {
        "id": "14.03", "section": 14, "phase": "arrival", "risk": 1, "critical": False,
        "context": "You suspect a bird hit the wing during the approach.",
        "stem": "A bird strike should be reported to:",
        "options": [
            "Transport Canada using the wildlife strike report.",
            "the aircraft manufacturer only.",
            "local police.",
            "no one, unless there is damage.",
        ],
        "explanation": "All wildlife strikes should be reported to Transport Canada, damage or not.",
    },
    {
        "id": "14.04", "section": 14, "phase": "arrival", "risk": 2, "critical": False,
        "context": "A flock of gulls lifts off beside Runway {runway} as you approach.",
        "stem": "If birds are on or near the runway during your final approach, you should:",
        "options": [
            "continue and land normally.",
            "go around and advise the tower or traffic.",
            "turn on the landing light and continue.",
            "descend below the birds.",
        ],
        "explanation": "Going around avoids the flock and gives the aerodrome time to disperse it.",
    },
]

# ============================================================================
# 答案表（题目 ID → 正确选项 1-4）
# ============================================================================
ANSWER_KEY = {
    "1.01": 1, "1.02": 3, "1.03": 2, "1.04": 4, "1.05": 1,
    "2.01": 3, "2.02": 1, "2.03": 2, "2.04": 4, "2.05": 1, "2.06": 3,
    "3.01": 3, "3.02": 4, "3.08": 3, "3.10": 2, "3.12": 3, "3.15": 1,
    "3.18": 1, "3.19": 2, "3.20": 4,
    "4.01": 2, "4.03": 1, "4.05": 3, "4.08": 4, "4.10": 2,
    "5.01": 4, "5.04": 3, "5.07": 2, "5.09": 1, "5.11": 1,
    "6.01": 1, "6.05": 2, "6.07": 3, "6.08": 1, "6.09": 2, "6.10": 4,
    "6.11": 3, "6.12": 2, "6.13": 1, "6.14": 2, "6.18": 3, "6.22": 1,
    "7.06": 1, "7.09": 2, "7.10": 3, "7.12": 4, "7.15": 1,
    "8.01": 2, "8.02": 3, "8.06": 2, "8.12": 2, "8.13": 2,
    "9.01": 3, "9.02": 2, "9.03": 1, "9.05": 4, "9.07": 1,
    "10.04": 2, "10.05": 1,
    "11.01": 2, "11.03": 3, "11.05": 3, "11.06": 4, "11.07": 1,
    "12.02": 2, "12.03": 1, "12.04": 3, "12.05": 4,
    "13.02": 1, "13.03": 2, "13.04": 3, "13.05": 4, "13.06": 1,
    "13.07": 2, "13.08": 3,
    "14.01": 4, "14.03": 1, "14.04": 2,
}

# ============================================================================
# 出处文档
# ============================================================================
DOCUMENTS = {
    "TP11919": {
        "title": "Student Pilot Permit or Private Pilot Licence for Foreign and Military Applicants, Aviation Regulation Examination (PSTAR)",
        "edition": "Edition 10",
        "publisher": "Transport Canada",
    },
    "CARS": {
        "title": "Canadian Aviation Regulations (SOR/96-433)",
        "edition": "Current consolidation",
        "publisher": "Justice Laws",
    },
    "AIM": {
        "title": "Transport Canada Aeronautical Information Manual (TC AIM)",
        "edition": "TP 14371",
        "publisher": "Transport Canada",
    },
    "RIC21": {
        "title": "Study Guide for the Restricted Operator Certificate with Aeronautical Qualification",
        "edition": "RIC-21",
        "publisher": "Innovation, Science and Economic Development Canada",
    },
}

# (题目 ID, 文档, 条款, 摘要)
REFERENCES = [
    ("1.01", "CARS", "602.19(2)", "Aircraft converging: the aircraft that has the other on its right shall give way."),
    ("1.02", "CARS", "602.19(3)", "Approaching head-on: each aircraft shall alter its heading to the right."),
    ("1.03", "CARS", "602.19(4)", "An overtaking aircraft shall alter its heading to the right."),
    ("1.04", "CARS", "602.19(2)", "Power-driven heavier-than-air aircraft give way to airships, gliders and balloons."),
    ("1.05", "CARS", "602.19(7)", "The aircraft at the lower altitude has the right of way when landing."),
    ("2.01", "AIM", "RAC 4.2.11", "Series of green flashes: return for landing / cleared to taxi."),
    ("2.02", "AIM", "RAC 4.2.11", "Steady red: give way and continue circling / stop."),
    ("2.03", "AIM", "RAC 4.2.11", "Series of red flashes: aerodrome unsafe / taxi clear of landing area."),
    ("2.04", "AIM", "RAC 4.2.11", "Steady green: cleared to land / cleared for take-off."),
    ("2.05", "AIM", "RAC 4.2.11", "Series of white flashes: return to starting point on the aerodrome."),
    ("2.06", "AIM", "RAC 4.2.11", "Flashing runway or taxiway lights: vacate the manoeuvring area immediately."),
    ("3.01", "RIC21", "2.3", "Phonetic alphabet: V - Victor."),
    ("3.02", "RIC21", "2.9", "Readability scale one to five; five is perfectly readable."),
    ("3.08", "AIM", "COM 5.11", "Pilots should monitor 121.5 MHz whenever practicable."),
    ("3.10", "AIM", "RAC 4.2.7", "Pilots shall read back hold short instructions."),
    ("3.12", "RIC21", "2.6", "WILCO: your message understood and will be complied with."),
    ("3.15", "RIC21", "2.6", "ROGER: I have received all of your last transmission."),
    ("3.18", "RIC21", "4.2", "The distress signal MAYDAY is spoken three times."),
    ("3.18", "AIM", "SAR 4.1", "Distress messages have priority over all other transmissions."),
    ("3.19", "RIC21", "4.5", "The urgency signal PAN PAN is spoken three times."),
    ("3.20", "AIM", "RAC 1.9.6", "Code 7700 indicates an emergency."),
    ("4.01", "AIM", "AGA 5.4.4", "Runway holding position markings: hold on the solid-line side."),
    ("4.03", "AIM", "AGA 5.4.2", "Runway designators are the magnetic heading to the nearest ten degrees."),
    ("4.05", "AIM", "AGA 5.7", "A closed runway is marked with an X."),
    ("4.08", "AIM", "AGA 5.9", "A wind direction indicator is fully extended at 15 knots."),
    ("4.10", "AIM", "AGA 7.11", "Taxiway edge lights are blue."),
    ("5.01", "CARS", "605.03", "Documents required on board an aircraft."),
    ("5.04", "CARS", "602.89", "The pilot-in-command shall ensure passengers are briefed."),
    ("5.07", "AIM", "COM 5.11", "121.5 MHz is the VHF emergency frequency."),
    ("5.09", "CARS", "602.89", "Safety briefing contents before take-off."),
    ("5.11", "CARS", "605.14", "Instruments required for day VFR flight."),
    ("6.01", "CARS", "602.01", "Pilot-in-command responsibility for the aircraft."),
    ("6.05", "AIM", "RAC 4.2.11", "NORDO arrivals cross 500 ft above circuit height."),
    ("6.07", "CARS", "602.14", "Minimum altitudes over built-up areas."),
    ("6.08", "AIM", "RAC 4.3", "Standard circuit height is 1,000 ft AAE."),
    ("6.09", "CARS", "602.117", "Special VFR requires ATC authorization."),
    ("6.10", "CARS", "602.96", "Turns in the circuit are made to the left unless otherwise specified."),
    ("6.11", "CARS", "602.96", "Take-off clearance is required at controlled aerodromes."),
    ("6.12", "AIM", "AIR 2.4", "Gusty wind approach speed additive."),
    ("6.13", "CARS", "602.114", "VFR flight responsibility of the pilot-in-command."),
    ("6.14", "CARS", "602.34", "VFR cruising altitudes by track."),
    ("6.18", "AIM", "RAC 1.9.6", "Code 7600 indicates communication failure."),
    ("6.22", "CARS", "601.08", "Class C airspace: VFR requires clearance."),
    ("7.06", "AIM", "AIR 2.9", "Landing behind a larger aircraft: stay above its path."),
    ("7.09", "AIM", "AIR 2.9", "Departing behind a larger aircraft: lift off before its rotation point."),
    ("7.10", "AIM", "AIR 2.9", "Vortex strength is greatest when heavy, clean and slow."),
    ("7.12", "AIM", "AIR 2.4", "Crosswind landing technique."),
    ("7.15", "AIM", "AIR 2.4", "Control positions while taxiing in wind."),
    ("8.01", "CARS", "602.02", "Fitness of flight crew members."),
    ("8.02", "CARS", "602.03", "Alcohol: 12 hours before acting as a crew member."),
    ("8.06", "AIM", "AIR 3.9", "Motion sickness in passengers."),
    ("8.12", "CARS", "404.04", "Medical validity at age 40 and over."),
    ("8.13", "CARS", "404.04", "Medical validity under age 40."),
    ("9.01", "CARS", "602.88", "Day VFR helicopter fuel reserve: 20 minutes."),
    ("9.02", "CARS", "602.88", "Day VFR aeroplane fuel reserve: 30 minutes."),
    ("9.03", "CARS", "602.73", "Flight plan or itinerary beyond 25 NM."),
    ("9.05", "CARS", "602.76", "Changes to a flight plan shall be reported."),
    ("9.07", "AIM", "RAC 3.12", "SAR alerting one hour after the ETA."),
    ("10.04", "CARS", "605.25", "Use of safety belts."),
    ("10.05", "AIM", "AIR 2.3", "Door opening in flight: maintain control."),
    ("11.01", "AIM", "SAR 3.6", "Activate the ELT when an emergency develops."),
    ("11.03", "AIM", "SAR 3.8", "Report inadvertent ELT activation."),
    ("11.05", "AIM", "AGA 1.15", "Bird strike response and reporting."),
    ("11.06", "AIM", "MET 2.2", "Avoid severe thunderstorms by at least 20 NM."),
    ("11.07", "AIM", "MET 2.2", "Hail under the anvil of a thunderstorm."),
    ("12.02", "CARS", "602.114", "VFR minima in controlled airspace."),
    ("12.03", "CARS", "602.115", "VFR minima in uncontrolled airspace at or above 1,000 ft AGL."),
    ("12.04", "CARS", "602.115", "VFR minima in uncontrolled airspace below 1,000 ft AGL."),
    ("12.05", "AIM", "AIR 1.6", "Inadvertent IMC: 180-degree turn."),
    ("13.02", "CARS", "602.117", "Special VFR is conducted only with ATC authorization."),
    ("13.03", "CARS", "602.117", "Special VFR minimum visibility for aeroplanes: 1 SM."),
    ("13.04", "CARS", "602.117", "Special VFR: clear of cloud and in sight of the surface."),
    ("13.05", "CARS", "602.117", "Special VFR entry when below VFR minima."),
    ("13.06", "AIM", "MET 8.3", "Ceiling definition."),
    ("13.07", "CARS", "602.101", "Reporting before entering an MF area."),
    ("13.08", "AIM", "RAC 4.5.2", "Joining the circuit at an uncontrolled aerodrome."),
    ("14.01", "AIM", "GEN 3.3", "Reporting aviation accidents to the TSB."),
    ("14.03", "AIM", "AGA 1.15", "Wildlife strike reporting."),
    ("14.04", "AIM", "AGA 1.15", "Birds on the runway: go around."),
]
