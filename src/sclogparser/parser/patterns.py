"""Literal markers and compiled patterns for Game.log parsing."""

import re

# Digits are spelled [0-9] throughout: \d also matches non-ASCII decimal digits

# Leading timestamp token (between the first '<' and '>')
# Example: <2025-06-20T23:50:29.843Z> [Notice] <Actor Death> CActor::Kill: ...
TIMESTAMP_PATTERN = re.compile(
    r"(?P<year>[0-9]{4})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})"
    r"T(?P<hour>[0-9]{2}):(?P<minute>[0-9]{2}):(?P<second>[0-9]{2})"
    r"\.(?P<millis>[0-9]{3})Z"
)

# Plain decimal number as written in vector components (no exponent, no inf/nan)
DECIMAL_PATTERN = re.compile(r"[-+]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")

# Non-negative integer (destroy levels)
INTEGER_PATTERN = re.compile(r"[0-9]+")

# Trailing numeric instance suffix on asset codes
# Example: HRST_LaserBeam_Bespoke_4510244335981 -> HRST_LaserBeam_Bespoke
ID_SUFFIX_PATTERN = re.compile(r"_[0-9]+$")

# Vector layout: "x: 1, y: 2, z: 3" optionally followed by " vel x: 4, y: 5, z: 6"
VELOCITY_SEPARATOR = " vel "

# Vehicle destruction
# Example: <2025-06-20T23:50:29.843Z> [Notice] <Vehicle Destruction> CVehicle::OnAdvanceDestroyLevel:
#   Vehicle 'MISC_Starlancer_TAC_4528531523558' [4528531523558] in zone 'Stanton1'
#   [pos x: -141105.640836, y: 312066.617001, z: 228710.641646 vel x: 0.000000, y: 0.000000, z: 0.000000]
#   driven by 'Rydianna' [326852421041] advanced from destroy level 0 to 1
#   caused by 'WhatIdo' [202153873895] with 'Combat' [Team_VehicleFeatures][Vehicle]
VEHICLE_NAME_OPEN = "Vehicle '"
ZONE_OPEN = "in zone '"
POSITION_OPEN = "[pos "
DRIVER_OPEN = "driven by '"
DESTROY_LEVEL_OPEN = "advanced from destroy level "
DESTROY_LEVEL_TO = " to "
CAUSER_OPEN = "caused by '"
CAUSE_OPEN = "with '"

# Actor death
# Example: <2025-06-21T01:22:47.877Z> [Notice] <Actor Death> CActor::Kill:
#   'PU_Human_Enemy_GroundCombat_NPC_ASD_soldier_4529397865889' [4529397865889]
#   in zone 'pyro1' killed by 'Rydianna' [326852421041]
#   using 'behr_lmg_ballistic_01_4530103770551' [Class behr_lmg_ballistic_01]
#   with damage type 'Bullet' from direction x: -0.592138, y: 0.206040, z: -0.779051
#   [Team_ActorTech][Actor]
VICTIM_OPEN = "Kill: '"
KILLER_OPEN = "killed by '"
WEAPON_OPEN = "using '"
CLASS_BLOCK_OPEN = "[Class"
DAMAGE_TYPE_OPEN = "with damage type '"
DIRECTION_OPEN = "direction "

# Hostility events
# Example: <2025-06-21T01:30:02.114Z> [Notice] <Debug Hostility Events> [OnHandleHit]
#   Fake hit FROM Rydianna TO MISC_Starlancer_TAC_4528531523558.
#   Being sent to child Rydianna [Team_MissionFeatures][HitInfo]
HIT_SOURCE_OPEN = " FROM "
HIT_TARGET_OPEN = " TO "
HIT_TARGET_END = "."
HIT_CHILD_OPEN = " child "
HIT_CHILD_TERMINATORS = (" ", "[", ".")

# Shared
QUOTE = "'"
BRACKET_OPEN = "["
BRACKET_CLOSE = "]"

# Substring marking AI-controlled actors (rendered muted)
NPC_MARKER = "NPC"
