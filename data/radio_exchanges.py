"""
无线电通话模板
题目之间穿插的非评分卡片，展示真实的 ATC / 飞行员通话
{callsign} {runway} {icao} 在生成航段时替换为本次 brief 的值
"""

RADIO_EXCHANGES = [
    # ============================================================================
    # 起飞前
    # ============================================================================
    {
        "id": "pre-atis",
        "phase": "preflight",
        "context": "You tune to the ATIS frequency before starting the engine.",
        "lines": [
            ("atc", "{icao} information Bravo. One eight zero zero zulu. Wind two seven zero at eight. Visibility one five. Few five thousand five hundred. Altimeter three zero zero five. Landing and departing Runway {runway}. Advise on initial contact you have information Bravo."),
        ],
    },
    {
        "id": "pre-radio-check",
        "phase": "preflight",
        "context": "Engine started. You do a preflight radio check.",
        "lines": [
            ("pilot", "{icao} Ground, {callsign}, request radio check on one two one decimal niner."),
            ("atc", "{callsign}, {icao} Ground, reading you five."),
            ("pilot", "Five, {callsign}, thank you."),
        ],
    },
    {
        "id": "pre-request-taxi",
        "phase": "preflight",
        "context": "Run-up complete. You're ready to request taxi.",
        "lines": [
            ("pilot", "{icao} Ground, {callsign}, Cessna one seven two, at the south apron with information Bravo, VFR, request taxi."),
            ("atc", "{callsign}, {icao} Ground, taxi Runway {runway} via Alpha."),
            ("pilot", "Taxi Runway {runway} via Alpha, {callsign}."),
        ],
    },
    {
        "id": "pre-standby",
        "phase": "preflight",
        "context": "You call Ground but they're busy with another aircraft.",
        "lines": [
            ("pilot", "{icao} Ground, {callsign}, request taxi."),
            ("atc", "{callsign}, {icao} Ground, stand by two minutes."),
        ],
    },
    {
        "id": "pre-urgency-cancel",
        "phase": "preflight",
        "context": "While monitoring the frequency, you hear an urgency cancellation.",
        "lines": [
            ("atc", "PAN PAN. All stations, all stations, all stations. This is Cessna Foxtrot November Juliett India. Now proceeding normally. Cessna Foxtrot November Juliett India. Out."),
        ],
    },

    # ============================================================================
    # 滑行 / 起飞
    # ============================================================================
    {
        "id": "taxi-hold-short",
        "phase": "taxi_depart",
        "context": "Taxiing to the runway, Ground issues a hold-short instruction.",
        "lines": [
            ("atc", "{callsign}, hold short Runway {runway}, traffic on final."),
            ("pilot", "Hold short Runway {runway}, {callsign}."),
        ],
    },
    {
        "id": "taxi-contact-tower",
        "phase": "taxi_depart",
        "context": "Ground hands you off to Tower.",
        "lines": [
            ("atc", "{callsign}, contact Tower on one one eight decimal seven."),
            ("pilot", "Tower, one one eight decimal seven, {callsign}."),
        ],
    },
    {
        "id": "taxi-ready-departure",
        "phase": "taxi_depart",
        "context": "You're holding short, ready for departure.",
        "lines": [
            ("pilot", "{icao} Tower, {callsign}, holding short Runway {runway}, ready for departure."),
            ("atc", "{callsign}, {icao} Tower, wind two seven zero at eight, Runway {runway}, cleared for take-off."),
            ("pilot", "Cleared for take-off, Runway {runway}, {callsign}."),
        ],
    },
    {
        "id": "taxi-say-again",
        "phase": "taxi_depart",
        "context": "Ground gives you a complex taxi instruction but you missed the first part.",
        "lines": [
            ("atc", "{callsign}, taxi Runway {runway} via Alpha, Bravo, hold short of Charlie."),
            ("pilot", "{callsign}, say again all before Bravo."),
            ("atc", "{callsign}, taxi Runway {runway} via Alpha, Bravo, hold short of Charlie."),
            ("pilot", "Runway {runway}, Alpha, Bravo, hold short Charlie, {callsign}."),
        ],
    },
    {
        "id": "taxi-correction",
        "phase": "taxi_depart",
        "context": "ATC corrects themselves mid-clearance.",
        "lines": [
            ("atc", "{callsign}, taxi Runway three zero, correction, Runway {runway} via Alpha."),
            ("pilot", "Runway {runway} via Alpha, {callsign}."),
        ],
    },
    {
        "id": "taxi-backtrack",
        "phase": "taxi_depart",
        "context": "No taxiway to the threshold. You need to backtrack.",
        "lines": [
            ("atc", "{callsign}, backtrack Runway {runway}, report ready."),
            ("pilot", "Backtrack Runway {runway}, wilco, {callsign}."),
        ],
    },

    # ============================================================================
    # 航路
    # ============================================================================
    {
        "id": "enr-checkin-terminal",
        "phase": "enroute",
        "context": "You check in with Terminal after the frequency change.",
        "lines": [
            ("pilot", "Toronto Terminal, {callsign}, Cessna one seven two, three thousand five hundred, VFR to Muskoka."),
            ("atc", "{callsign}, Toronto Terminal, radar identified, squawk one two zero zero, report any altitude changes."),
            ("pilot", "One two zero zero, wilco, {callsign}."),
        ],
    },
    {
        "id": "enr-traffic-advisory",
        "phase": "enroute",
        "context": "ATC calls out traffic.",
        "lines": [
            ("atc", "{callsign}, traffic, two o'clock, five miles, eastbound, a Dash 8 at four thousand."),
            ("pilot", "Traffic in sight, {callsign}."),
        ],
    },
    {
        "id": "enr-mf-position-report",
        "phase": "enroute",
        "context": "Approaching an uncontrolled aerodrome's mandatory frequency area.",
        "lines": [
            ("pilot", "Muskoka traffic, {callsign}, Cessna one seven two, one five miles south at three thousand five hundred, inbound for landing Runway one eight, Muskoka."),
        ],
    },
    {
        "id": "enr-altimeter-update",
        "phase": "enroute",
        "context": "ATC passes an updated altimeter setting.",
        "lines": [
            ("atc", "{callsign}, altimeter two niner niner two."),
            ("pilot", "Two niner niner two, {callsign}."),
        ],
    },
    {
        "id": "enr-seelonce",
        "phase": "enroute",
        "context": "ATC imposes radio silence during a distress situation.",
        "lines": [
            ("atc", "All stations, all stations, all stations. This is Toronto Centre. SEELONCE MAYDAY. Out."),
        ],
    },
    {
        "id": "enr-signal-check",
        "phase": "enroute",
        "context": "Your transmissions feel weak. You request a signal check.",
        "lines": [
            ("pilot", "Toronto Centre, {callsign}, request signal check on one three two decimal zero two."),
            ("atc", "{callsign}, Toronto Centre, reading you four."),
            ("pilot", "Four, thank you, {callsign}."),
        ],
    },

    # ============================================================================
    # 进近 / 着陆
    # ============================================================================
    {
        "id": "arr-initial-call",
        "phase": "arrival",
        "context": "You contact Tower inbound for landing.",
        "lines": [
            ("pilot", "{icao} Tower, {callsign}, Cessna one seven two, one zero miles south at two thousand five hundred, inbound for landing with information Bravo."),
            ("atc", "{callsign}, {icao} Tower, expect Runway {runway}, join left downwind, report midfield downwind."),
            ("pilot", "Left downwind Runway {runway}, wilco, {callsign}."),
        ],
    },
    {
        "id": "arr-downwind-sequence",
        "phase": "arrival",
        "context": "You report midfield downwind.",
        "lines": [
            ("pilot", "{icao} Tower, {callsign}, midfield downwind Runway {runway}."),
            ("atc", "{callsign}, number two, follow the Cherokee on base. Caution wake turbulence, Boeing seven three seven departed two minutes ago."),
            ("pilot", "Number two, following the Cherokee, {callsign}."),
        ],
    },
    {
        "id": "arr-cleared-land",
        "phase": "arrival",
        "context": "On final approach, you receive landing clearance.",
        "lines": [
            ("atc", "{callsign}, wind two seven zero at one zero, Runway {runway}, cleared to land."),
            ("pilot", "Cleared to land, Runway {runway}, {callsign}."),
        ],
    },
    {
        "id": "arr-words-twice",
        "phase": "arrival",
        "context": "Poor reception on approach. Tower transmits each word twice.",
        "lines": [
            ("atc", "{callsign}, {callsign}, words twice. Runway, Runway, {runway}, {runway}, cleared to land, cleared to land."),
            ("pilot", "Cleared to land, Runway {runway}, {callsign}."),
        ],
    },
    {
        "id": "arr-exit-contact-ground",
        "phase": "arrival",
        "context": "After landing, Tower hands you back to Ground.",
        "lines": [
            ("atc", "{callsign}, turn right next taxiway, contact Ground on one two one decimal niner."),
            ("pilot", "Right next taxiway, Ground one two one decimal niner, {callsign}."),
        ],
    },
]
