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

""" Drawing the tank, and the curses window it is drawn on. """

import curses

from .config import (WATER_CHAR, WATER_COLOR, BUBBLE_CHAR, BUBBLE_COLOR,
                     POLL_TIMEOUT_MS)

# --- Color Definitions ---
# Map color names to curses color constants
COLOR_MAP = {
    'black': curses.COLOR_BLACK,
    'red': curses.COLOR_RED,
    'green': curses.COLOR_GREEN,
    'yellow': curses.COLOR_YELLOW,
    'blue': curses.COLOR_BLUE,
    'magenta': curses.COLOR_MAGENTA,
    'cyan': curses.COLOR_CYAN,
    'white': curses.COLOR_WHITE,
}


def draw_world(world, surface):
    """ Redraw the whole tank: waterline, then bubbles, fish and sharks. """
    surface.clear(full=world.needs_redraw)
    world.needs_redraw = False

    surface.draw(0, world.height - 1, WATER_CHAR * world.width, WATER_COLOR)
    for bubble in world.bubbles:
        surface.draw(int(bubble.x), int(bubble.y), BUBBLE_CHAR, BUBBLE_COLOR)
    # Later draws cover earlier ones, so sharks end up on top
    for swimmer in world.fish + world.sharks:
        surface.draw(int(swimmer.x), int(swimmer.y),
                     swimmer.current_sprite(), swimmer.color)

    surface.reset_color()
    surface.flush()


# --- Curses Surface ---
class CursesSurface:
    """ The drawing and input capabilities the tank needs from a curses window. """

    def __init__(self, stdscr, poll_timeout_ms=POLL_TIMEOUT_MS):
        self.stdscr = stdscr
        self.stdscr.keypad(True) # KEY_RESIZE and friends
        self.stdscr.timeout(poll_timeout_ms) # getch() waits at most this long
        self.color_pairs = {}
        if curses.has_colors():
            self._init_colors()

    def _init_colors(self):
        """ Initialize one curses color pair per color name. """
        curses.start_color()
        curses.use_default_colors() # Allow use of default terminal background

        pair_num = 1 # Start from 1, 0 is reserved for default white on black
        for name, fg in COLOR_MAP.items():
            if pair_num > curses.COLOR_PAIRS - 1:
                break
            curses.init_pair(pair_num, fg, -1) # -1 keeps the default background
            self.color_pairs[name] = curses.color_pair(pair_num)
            pair_num += 1

    def get_color_attr(self, color):
        return self.color_pairs.get(color, curses.A_NORMAL)

    def size(self):
        """ Current window size as (width, height). """
        height, width = self.stdscr.getmaxyx()
        return width, height

    def poll_key(self):
        """ Next key code, or -1 once the poll timeout runs out. """
        return self.stdscr.getch()

    def clear(self, full=False):
        if full:
            self.stdscr.clear() # Repaint every cell on the next refresh
        else:
            self.stdscr.erase()

    def draw(self, x, y, text, color):
        """ Write ``text`` at column ``x``, row ``y``, clipped to the window. """
        width, height = self.size()
        if not 0 <= y < height:
            return
        if x < 0:
            text = text[-x:]
            x = 0
        text = text[:max(0, width - x)]
        if not text:
            return
        try:
            self.stdscr.addstr(y, x, text, self.get_color_attr(color))
        except curses.error:
            # Writing the bottom-right cell moves the cursor off the window;
            # curses reports that as an error after the text is drawn.
            if not (y == height - 1 and x + len(text) == width):
                raise

    def reset_color(self):
        self.stdscr.attrset(curses.A_NORMAL)

    def flush(self):
        self.stdscr.refresh()
