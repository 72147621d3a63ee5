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

""" The screensaver loop and the command line entry point. """

import argparse
import curses
import logging
import os
import random
import signal
import sys

from . import VERSION
from .config import VARIANTS, DEFAULT_VARIANT
from .render import CursesSurface, draw_world
from .world import World

logger = logging.getLogger(__name__)

ESCAPE = 27
QUIT_KEYS = (ord('q'), ord('Q'), ESCAPE)
FAREWELL = "Goodbye! Thanks for visiting the aquarium."


# --- Tank Class ---
class Tank:
    """ Runs poll -> step -> draw until a quit key arrives. """

    def __init__(self, surface, world):
        self.surface = surface
        self.world = world
        self.running = False

    def stop(self):
        self.running = False

    def handle_key(self, key):
        if key in QUIT_KEYS:
            self.stop()
        elif key == curses.KEY_RESIZE:
            width, height = self.surface.size()
            self.world.resize(width, height)

    def tick(self):
        """ One iteration; returns False once the tank has stopped. """
        key = self.surface.poll_key()
        if key != -1:
            self.handle_key(key)
        if not self.running:
            return False
        self.world.step()
        draw_world(self.world, self.surface)
        return True

    def run(self):
        self.running = True
        while self.tick():
            pass
        logger.info("Stopped after %d ticks", self.world.ticks)


# --- Terminal Setup ---
def set_cursor(visibility):
    """ Show or hide the cursor where the terminal supports it. """
    try:
        curses.curs_set(visibility)
    except curses.error:
        logger.debug("Terminal cannot change cursor visibility")


def run_tank(stdscr, config, seed=None):
    """ Body of curses.wrapper(): build the tank and run it to completion. """
    global tank_instance

    surface = CursesSurface(stdscr)
    width, height = surface.size()
    world = World(width, height, config, random.Random(seed)).populate()
    logger.info("Starting %dx%d tank with %d fish and %d sharks (seed=%s)",
                width, height, len(world.fish), len(world.sharks), seed)

    tank_instance = Tank(surface, world)
    set_cursor(0)
    try:
        tank_instance.run()
    finally:
        tank_instance = None
        stdscr.erase()
        stdscr.refresh()
        set_cursor(1)


# --- Signal Handling ---
tank_instance = None # Global reference for signal handler


def signal_handler(sig, frame):
    """ Ctrl+C and SIGTERM quit the same way the 'q' key does. """
    if tank_instance is not None:
        tank_instance.stop()
    else:
        sys.exit(0)


# --- Logging ---
def configure_logging(level=None, log_file=None):
    """ Set up logging without writing to the terminal curses is using.

    The level falls back to ``FISHTANK_LOG_LEVEL`` and then WARNING. Records
    only go somewhere when ``log_file`` is given.
    """
    raw_level = level if level is not None else os.getenv("FISHTANK_LOG_LEVEL")
    resolved_level = (raw_level or "WARNING").upper()
    if log_file:
        handler = logging.FileHandler(log_file)
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s [%(name)s] %(message)s"))
    else:
        handler = logging.NullHandler()

    root = logging.getLogger("fishtank")
    root.handlers[:] = [handler]
    root.setLevel(resolved_level)
    root.propagate = False
    return root


# --- Argument Parsing ---
def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="fishtank",
        description=f"fishtank v{VERSION} - ASCII aquarium screensaver")
    parser.add_argument('--variant', choices=sorted(VARIANTS),
                        default=DEFAULT_VARIANT,
                        help="basic: side to side only; depth: fish also "
                             "drift up and down; predator: adds sharks that "
                             "eat fish (default: %(default)s)")
    parser.add_argument('-s', '--seed', type=int, default=None,
                        help="Seed the random generator for a repeatable tank")
    parser.add_argument('--log-file', default=None,
                        help="Write log records to this file")
    parser.add_argument('--version', action='version',
                        version=f"%(prog)s {VERSION}")
    return parser.parse_args(argv)


# --- Main Execution ---
def main(argv=None):
    args = parse_args(argv)
    configure_logging(log_file=args.log_file)

    previous_handlers = {
        sig: signal.signal(sig, signal_handler)
        for sig in (signal.SIGINT, signal.SIGTERM)
    }
    try:
        # curses.wrapper restores the terminal however run_tank exits
        curses.wrapper(run_tank, VARIANTS[args.variant], args.seed)
    except curses.error as e:
        logger.error("Terminal error: %s", e)
        print(f"\nCurses Error: {e}", file=sys.stderr)
        print("Ensure your terminal window is large enough.", file=sys.stderr)
        return 1
    finally:
        for sig, handler in previous_handlers.items():
            signal.signal(sig, handler)

    print(FAREWELL)
    return 0


def cli():
    sys.exit(main())
