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

""" Fish, sharks and bubbles: plain data plus their per-tick motion. """

from .config import (FISH_SPRITES, SHARK_SPRITE, FISH_COLORS, SHARK_COLOR,
                     SPEED, MARGINS)

# Bracket pairs swap when a sprite turns around; everything else is kept
MIRROR = str.maketrans('<>(){}[]', '><)(}{][')


def mirror_sprite(sprite):
    """ Return the left-facing version of a right-facing sprite. """
    return sprite[::-1].translate(MIRROR)


def uniform(rng, low, high):
    """ rng.uniform() that tolerates an empty range on tiny terminals. """
    return rng.uniform(low, max(low, high))


# --- Swimmers ---
class Swimmer:
    """ Anything that swims side to side and bounces off the tank walls.

    Subclasses set ``kind``, which selects the margins and the chance of a
    random vertical turn from the configuration.
    """
    kind = ''

    def __init__(self, x, y, speed, direction, color, sprite,
                 vspeed=0.0, vdirection=1):
        self.x = x
        self.y = y
        self.speed = speed
        self.vspeed = vspeed
        self.direction = direction   # 1 = right, -1 = left
        self.vdirection = vdirection # 1 = down, -1 = up
        self.color = color
        self.sprite = sprite

    def width(self):
        return len(self.sprite)

    def margins(self):
        return MARGINS[self.kind]

    def current_sprite(self):
        """ The sprite as drawn for the current direction of travel. """
        if self.direction < 0:
            return mirror_sprite(self.sprite)
        return self.sprite

    def update(self, world):
        """ Move one tick and reflect off the walls of ``world``. """
        config = world.config
        self.x += self.speed * self.direction
        if config.vertical_movement:
            self.y += self.vspeed * self.vdirection

        self.reflect_x(world.width)
        if config.vertical_movement:
            self.reflect_y(world.height)
            flip_chance = getattr(config, f'{self.kind}_flip_chance')
            if world.rng.random() < flip_chance:
                self.vdirection = -self.vdirection

    def reflect_x(self, width):
        if self.x <= 1.0:
            self.x = 1.0
            self.direction = 1
        elif self.x + self.width() >= width:
            self.x = float(width - self.width())
            self.direction = -1

    def reflect_y(self, height):
        top, bottom = self.margins()
        if self.y <= top:
            self.y = top
            self.vdirection = 1
        elif self.y >= height - bottom:
            self.y = height - bottom
            self.vdirection = -1

    def clamp(self, width, height):
        """ Pull the swimmer back inside a (resized) tank without turning it. """
        top, bottom = self.margins()
        self.x = max(1.0, min(self.x, float(width - self.width())))
        self.y = max(top, min(self.y, height - bottom))

    def __repr__(self):
        return (f"{type(self).__name__}(x={self.x:.2f}, y={self.y:.2f}, "
                f"direction={self.direction}, sprite={self.sprite!r})")


class Fish(Swimmer):
    kind = 'fish'

    def __init__(self, x, y, speed, direction, color, sprite_index,
                 vspeed=0.0, vdirection=1):
        super().__init__(x, y, speed, direction, color,
                         FISH_SPRITES[sprite_index], vspeed, vdirection)
        self.sprite_index = sprite_index


class Shark(Swimmer):
    kind = 'shark'

    def __init__(self, x, y, speed, direction, vspeed=0.0, vdirection=1):
        super().__init__(x, y, speed, direction, SHARK_COLOR, SHARK_SPRITE,
                         vspeed, vdirection)


# --- Bubbles ---
class Bubble:
    def __init__(self, x, y, speed):
        self.x = x
        self.y = y
        self.speed = speed

    def update(self, world):
        """ Rise one tick, wobbling sideways now and then. """
        self.y -= self.speed
        if world.rng.random() < world.config.bubble_jitter_chance:
            self.x += world.rng.uniform(-0.5, 0.5)
            self.x = max(1.0, min(self.x, world.width - 1.0))

    def popped(self):
        """ True once the bubble has reached the surface. """
        return self.y <= 1.0

    def __repr__(self):
        return f"Bubble(x={self.x:.2f}, y={self.y:.2f}, speed={self.speed:.2f})"


# --- Creation ---
def create_fish(world):
    """ A fish with random position, speed, color and sprite. """
    rng = world.rng
    sprite_index = rng.randrange(len(FISH_SPRITES))
    sprite_width = len(FISH_SPRITES[sprite_index])
    top, bottom = MARGINS['fish']
    vspeed = 0.0
    if world.config.vertical_movement:
        vspeed = rng.uniform(*SPEED['fish_vertical'])
    return Fish(
        x=uniform(rng, 1.0, world.width - sprite_width),
        y=uniform(rng, top, world.height - bottom),
        speed=rng.uniform(*SPEED['fish']),
        direction=rng.choice((1, -1)),
        color=rng.choice(FISH_COLORS),
        sprite_index=sprite_index,
        vspeed=vspeed,
        vdirection=rng.choice((1, -1)),
    )


def create_shark(world):
    rng = world.rng
    top, bottom = MARGINS['shark']
    vspeed = 0.0
    if world.config.vertical_movement:
        vspeed = rng.uniform(*SPEED['shark_vertical'])
    return Shark(
        x=uniform(rng, 1.0, world.width - len(SHARK_SPRITE)),
        y=uniform(rng, top, world.height - bottom),
        speed=rng.uniform(*SPEED['shark']),
        direction=rng.choice((1, -1)),
        vspeed=vspeed,
        vdirection=rng.choice((1, -1)),
    )


def create_bubble(world):
    """ A bubble on the bottom row at a random column. """
    rng = world.rng
    return Bubble(
        x=uniform(rng, 1.0, world.width - 1.0),
        y=world.height - 1.0,
        speed=rng.uniform(*SPEED['bubble']),
    )
