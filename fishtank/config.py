#############################################################################
# fishtank - An aquarium screensaver in ASCII art (Python/Curses Version)
#
# License:
#
# This program is free software; you can redistribute it and/or
# modify it under the terms of the GNU General Public License
# as published by the Free Software Foundation; either version 2
# of the License, or (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
#############################################################################

from collections import namedtuple

# --- Sprites ---
# Every sprite faces right; left-facing versions come from mirror_sprite().
FISH_SPRITES = [
    "><>",       # small fish
    "<°)))><",   # long fish
    "(Q)",       # puffer
]
SHARK_SPRITE = "\\__/^\\____{o>"

BUBBLE_CHAR = '.'
WATER_CHAR = '~'

# --- Colors ---
# Names understood by the renderer's color table
FISH_COLORS = ['red', 'green', 'yellow', 'blue', 'magenta', 'cyan']
SHARK_COLOR = 'white'
BUBBLE_COLOR = 'white'
WATER_COLOR = 'blue'

# --- Motion ranges (cells per tick) ---
SPEED = {
    'fish': (0.2, 0.6),
    'fish_vertical': (0.05, 0.15),
    'shark': (0.6, 1.0),
    'shark_vertical': (0.02, 0.06),
    'bubble': (0.1, 0.3),
}

# Distance kept from the top/bottom of the screen (waterline and floor)
MARGINS = {
    'fish': (1.0, 2.0),
    'shark': (2.0, 3.0),
}

POLL_TIMEOUT_MS = 50

EntityCounts = namedtuple('EntityCounts', ['fish', 'sharks'])

TankConfig = namedtuple('TankConfig', [
    'counts',
    'vertical_movement',
    'predation',
    'bubble_chance',
    'bubble_jitter_chance',
    'fish_flip_chance',
    'shark_flip_chance',
    'fish_floor',
    'catch_box',        # (dx, dy) in cells
])

BASIC = TankConfig(
    counts=EntityCounts(fish=10, sharks=0),
    vertical_movement=False,
    predation=False,
    bubble_chance=0.10,
    bubble_jitter_chance=0.3,
    fish_flip_chance=0.02,
    shark_flip_chance=0.01,
    fish_floor=5,
    catch_box=(8.0, 2.0),
)

VARIANTS = {
    'basic': BASIC,
    'depth': BASIC._replace(
        counts=EntityCounts(fish=12, sharks=0),
        vertical_movement=True,
        bubble_chance=0.15,
    ),
    'predator': BASIC._replace(
        counts=EntityCounts(fish=10, sharks=2),
        vertical_movement=True,
        predation=True,
        bubble_chance=0.20,
    ),
}
DEFAULT_VARIANT = 'basic'
