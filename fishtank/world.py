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

""" The tank: viewport size, the creatures in it and the simulation step. """

import logging
import random

from .config import BASIC
from .entities import create_fish, create_shark, create_bubble

logger = logging.getLogger(__name__)


class World:
    def __init__(self, width, height, config=BASIC, rng=None):
        self.width = width
        self.height = height
        self.config = config
        self.rng = rng if rng is not None else random.Random()
        self.fish = []
        self.sharks = []
        self.bubbles = []
        self.ticks = 0
        self.needs_redraw = True # Force a full clear on the next render

    def populate(self):
        """ Stock the tank with the configured number of fish and sharks. """
        counts = self.config.counts
        self.fish.extend(create_fish(self) for _ in range(counts.fish))
        self.sharks.extend(create_shark(self) for _ in range(counts.sharks))
        return self

    def resize(self, width, height):
        """ Adopt a new viewport and pull everything back inside it. """
        logger.debug("Viewport resized from %dx%d to %dx%d",
                     self.width, self.height, width, height)
        self.width = width
        self.height = height
        for swimmer in self.fish + self.sharks:
            swimmer.clamp(width, height)
        for bubble in self.bubbles:
            bubble.x = max(1.0, min(bubble.x, width - 1.0))
            bubble.y = min(bubble.y, height - 1.0)
        self.needs_redraw = True

    def step(self):
        """ Advance the whole tank by one tick. """
        for fish in self.fish:
            fish.update(self)
        for shark in self.sharks:
            shark.update(self)

        if self.rng.random() < self.config.bubble_chance:
            self.bubbles.append(create_bubble(self))
        for bubble in self.bubbles:
            bubble.update(self)
        self.bubbles = [b for b in self.bubbles if not b.popped()]

        if self.config.predation:
            self.feed_sharks()
            self.restock()

        self.ticks += 1

    def feed_sharks(self):
        """ Remove every fish inside a shark's catch box; return the eaten. """
        reach_x, reach_y = self.config.catch_box
        eaten = []
        for shark in self.sharks:
            for fish in self.fish:
                if fish in eaten:
                    continue
                if abs(fish.x - shark.x) < reach_x and abs(fish.y - shark.y) < reach_y:
                    eaten.append(fish)
        if eaten:
            self.fish = [f for f in self.fish if f not in eaten]
            logger.debug("Tick %d: sharks ate %d fish", self.ticks, len(eaten))
        return eaten

    def restock(self):
        """ Top the fish population back up to the floor; return how many. """
        added = 0
        while len(self.fish) < self.config.fish_floor:
            self.fish.append(create_fish(self))
            added += 1
        if added:
            logger.debug("Tick %d: restocked %d fish", self.ticks, added)
        return added
