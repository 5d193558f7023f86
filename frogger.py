"""
Frogger Arcade in Python (Pygame)

Cross the stone lanes without getting hit by a bug!

Features:
- Classic 5x6 block grid: water goal row, three stone lanes, two grass rows
- Bugs spawn on a timer in a random lane with a random speed
- Pixel-space collision areas (player hitbox is narrower than a block)
- Reaching the water wins the round and clears the road
- Win / loss counters in the HUD
- Optional hitbox overlay for debugging collisions

Controls:
- Arrow keys: move (on key release)
- R: restart
- H: toggle hitboxes
- Esc: quit

Requires: pygame 2.x  (pip install pygame)

Run:
    python frogger.py
    python frogger.py --spawn-rate 1.5 --seed 7 --show-hitboxes
"""

import argparse
import logging
import math
import random
from dataclasses import dataclass
from typing import Callable, List, Optional, Union

import pygame

logger = logging.getLogger(__name__)


# ----------------------------- Config -----------------------------

CANVAS_WIDTH, CANVAS_HEIGHT = 505, 606
FPS = 60

# Grid: each block is one hop for the player.
NUM_COLS = 5
NUM_ROWS = 6
BLOCK_WIDTH = 101
BLOCK_HEIGHT = 83

# Lanes are rows 1..NUM_ENEMY_LANES; row 0 is the goal, the rest is grass.
NUM_ENEMY_LANES = 3

# Speeds are in pixels/second, half-open range [lo, hi)
ENEMY_SPEED_RANGE = (50, 300)

# Enemies per second
ENEMY_SPAWN_RATE = 0.5

PLAYER_START = (2, 4)  # (x_block, y_block)

CLEAR_ENEMIES_ON_LOSE = False

# Sprites are drawn one half block above their row.
SPRITE_Y_OFFSET = BLOCK_HEIGHT / 2
# Row bands sit this far below the row's pixel origin.
ROW_DRAW_OFFSET = 50

# Direction tokens delivered by the keyboard collaborator
DIR_UP = "up"
DIR_DOWN = "down"
DIR_LEFT = "left"
DIR_RIGHT = "right"

ALLOWED_KEYS = {
    pygame.K_LEFT: DIR_LEFT,
    pygame.K_UP: DIR_UP,
    pygame.K_RIGHT: DIR_RIGHT,
    pygame.K_DOWN: DIR_DOWN,
}

SPAWN_EVENT = pygame.USEREVENT + 1

# Colors
COL_BG = (255, 255, 255)
COL_WATER = (64, 164, 223)
COL_WATER_LIGHT = (100, 190, 240)
COL_STONE = (150, 150, 150)
COL_STONE_DARK = (120, 120, 120)
COL_GRASS = (102, 204, 102)
COL_GRASS_DARK = (85, 180, 85)
COL_BUG = (220, 50, 50)
COL_BUG_DARK = (150, 30, 30)
COL_BOY_SKIN = (255, 214, 170)
COL_BOY_HAIR = (110, 70, 40)
COL_BOY_SHIRT = (60, 110, 220)
COL_EYE = (50, 50, 50)
COL_SHADOW = (0, 0, 0, 70)
COL_HITBOX = (255, 0, 255)
COL_TEXT = (40, 40, 40)
COL_WIN = (40, 150, 60)
COL_LOSE = (200, 50, 50)


# ----------------------------- Errors -----------------------------

class InvalidInputError(ValueError):
    """Raised for a direction token the player does not understand."""


# ----------------------------- Helpers -----------------------------

def clamp(v, lo, hi):
    return lo if v < lo else hi if v > hi else v


def block_to_px(x_block: float, y_block: float):
    return x_block * BLOCK_WIDTH, y_block * BLOCK_HEIGHT


# ----------------------------- Geometry -----------------------------

@dataclass(frozen=True)
class Interval:
    """Inclusive numeric range [start, end]."""

    start: float
    end: float

    def __post_init__(self):
        if self.start > self.end:
            raise ValueError(f"Interval start {self.start} is after end {self.end}")

    def overlaps(self, other: Union[float, "Interval"]) -> bool:
        """True if a number lies in this range, or if two ranges intersect.

        Touching bounds count as overlap.
        """
        if isinstance(other, Interval):
            return self.start <= other.end and other.start <= self.end
        return self.start <= other <= self.end

    def __contains__(self, value: float) -> bool:
        return self.overlaps(value)


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned collision area in pixel space."""

    x: Interval
    y: Interval

    @classmethod
    def from_edges(cls, start_x: float, end_x: float, start_y: float, end_y: float) -> "BoundingBox":
        return cls(Interval(start_x, end_x), Interval(start_y, end_y))

    def collides_with(self, other: "BoundingBox") -> bool:
        return self.x.overlaps(other.x) and self.y.overlaps(other.y)

    def to_rect(self) -> pygame.Rect:
        # Inclusive bounds, so a 0..82 span is 83 pixels tall.
        return pygame.Rect(
            int(self.x.start),
            int(self.y.start),
            int(self.x.end - self.x.start) + 1,
            int(self.y.end - self.y.start) + 1,
        )


# ----------------------------- Game Objects -----------------------------

class Enemy:
    """A bug crossing one lane from left to right."""

    sprite = "enemy-bug"

    def __init__(self, lane_index: int, speed: float,
                 on_offscreen: Optional[Callable[["Enemy"], None]] = None):
        if not 0 <= lane_index < NUM_ENEMY_LANES:
            raise ValueError(f"Lane {lane_index} outside [0, {NUM_ENEMY_LANES})")
        if speed <= 0:
            raise ValueError(f"Enemy speed must be positive, got {speed}")
        self._lane_index = lane_index
        self._speed = float(speed)
        self._x = float(-BLOCK_WIDTH)  # start outside canvas
        self._row = 1 + lane_index
        self._on_offscreen = on_offscreen

    def __repr__(self):
        return f"Enemy(lane={self._lane_index}, speed={self._speed:.1f}, x={self._x:.1f})"

    @property
    def lane_index(self) -> int:
        return self._lane_index

    @property
    def row(self) -> int:
        return self._row

    @property
    def speed(self) -> float:
        return self._speed

    @property
    def x(self) -> float:
        return self._x

    @property
    def bounding_box(self) -> BoundingBox:
        start_y = self._row * BLOCK_HEIGHT
        return BoundingBox.from_edges(
            self._x,
            self._x + BLOCK_WIDTH,
            start_y,
            start_y + BLOCK_HEIGHT - 1,
        )

    @property
    def is_offscreen(self) -> bool:
        return self._x > CANVAS_WIDTH

    def update(self, dt: float):
        self._x += self._speed * dt
        if self.is_offscreen and self._on_offscreen is not None:
            self._on_offscreen(self)

    def draw(self, surf: pygame.Surface):
        draw_sprite(surf, self.sprite, self._x, self._row * BLOCK_HEIGHT - SPRITE_Y_OFFSET)


class Player:
    """The player character. Moves one block per key release."""

    def __init__(self, sprite: str = "char-boy",
                 on_goal: Optional[Callable[["Player"], None]] = None):
        self.sprite = sprite
        self._x_block, self._y_block = PLAYER_START
        self._on_goal = on_goal

    def __repr__(self):
        return f"Player(x_block={self._x_block}, y_block={self._y_block})"

    @property
    def x_block(self) -> int:
        return self._x_block

    @property
    def y_block(self) -> int:
        return self._y_block

    @property
    def bounding_box(self) -> BoundingBox:
        # A quarter block narrower on each side than the tile it stands on.
        inset = BLOCK_WIDTH / 4
        start_x, start_y = block_to_px(self._x_block, self._y_block)
        return BoundingBox.from_edges(
            start_x + inset,
            start_x + BLOCK_WIDTH - inset,
            start_y,
            start_y + BLOCK_HEIGHT - 1,
        )

    def update(self, dt: float):
        # Motion is input driven; dt is unused.
        if self._y_block == 0 and self._on_goal is not None:
            self._on_goal(self)

    def reset(self):
        self._x_block, self._y_block = PLAYER_START

    def handle_input(self, direction: Optional[str]):
        """Move one block in `direction`, staying inside the grid.

        A falsy direction (no mapped key) is ignored. Anything other than
        up/down/left/right raises InvalidInputError.
        """
        if not direction:
            return

        if direction == DIR_UP:
            self._y_block = clamp(self._y_block - 1, 0, NUM_ROWS - 1)
        elif direction == DIR_DOWN:
            self._y_block = clamp(self._y_block + 1, 0, NUM_ROWS - 1)
        elif direction == DIR_LEFT:
            self._x_block = clamp(self._x_block - 1, 0, NUM_COLS - 1)
        elif direction == DIR_RIGHT:
            self._x_block = clamp(self._x_block + 1, 0, NUM_COLS - 1)
        else:
            raise InvalidInputError(f"Unknown direction passed to handle_input(): {direction!r}")

        logger.debug("Player moved %s to (%d, %d)", direction, self._x_block, self._y_block)

    def draw(self, surf: pygame.Surface):
        x, y = block_to_px(self._x_block, self._y_block)
        draw_sprite(surf, self.sprite, x, y - SPRITE_Y_OFFSET)


# ----------------------------- Session -----------------------------

class GameSession:
    """Owns the player and the enemies and applies the game rules.

    Nothing here touches the display: the driver calls `tick(dt)` once per
    frame and `spawn_enemy()` from its spawn timer, both on the same thread.
    """

    def __init__(self, spawn_rate: float = ENEMY_SPAWN_RATE,
                 rng: Optional[random.Random] = None,
                 clear_enemies_on_lose: bool = CLEAR_ENEMIES_ON_LOSE):
        if not (math.isfinite(spawn_rate) and spawn_rate > 0):
            raise ValueError(f"Spawn rate must be a positive finite number, got {spawn_rate}")
        self.spawn_rate = spawn_rate
        self.rng = rng if rng is not None else random.Random()
        self.clear_enemies_on_lose = clear_enemies_on_lose

        self.player = Player(on_goal=self._on_player_goal)
        self.enemies: List[Enemy] = []
        self.wins = 0
        self.losses = 0

        self._pending_removals: List[Enemy] = []

    @property
    def spawn_period_ms(self) -> int:
        # pygame.time.set_timer treats 0 as "off", so never go below 1 ms.
        return max(1, round(1000 / self.spawn_rate))

    def reset(self):
        self.player.reset()
        self.enemies = []
        self._pending_removals = []
        self.wins = 0
        self.losses = 0
        logger.info("Session reset")

    def add_enemy(self, lane_index: int, speed: float) -> Enemy:
        enemy = Enemy(lane_index, speed, on_offscreen=self._on_enemy_offscreen)
        self.enemies.append(enemy)
        logger.debug("Spawned enemy in lane %d at %.1f px/s", lane_index, speed)
        return enemy

    def spawn_enemy(self) -> Enemy:
        """Add one enemy in a random lane with a random speed."""
        lo, hi = ENEMY_SPEED_RANGE
        lane = self.rng.randrange(NUM_ENEMY_LANES)
        speed = lo + self.rng.random() * (hi - lo)
        return self.add_enemy(lane, speed)

    def tick(self, dt: float):
        """Advance the game by `dt` seconds, then resolve collisions."""
        self.player.update(dt)

        for enemy in self.enemies:
            enemy.update(dt)
        self._apply_removals()

        self.check_collisions()

    def check_collisions(self) -> List[Enemy]:
        """Lose once for every enemy touching the player; return those enemies."""
        player_box = self.player.bounding_box
        hits = [e for e in self.enemies if e.bounding_box.collides_with(player_box)]
        for _ in hits:
            self._handle_lost()
        return hits

    def _on_enemy_offscreen(self, enemy: Enemy):
        self._pending_removals.append(enemy)

    def _apply_removals(self):
        if not self._pending_removals:
            return
        gone = {id(e) for e in self._pending_removals}
        for enemy in self._pending_removals:
            logger.debug("Removed off-screen %r", enemy)
        self.enemies = [e for e in self.enemies if id(e) not in gone]
        self._pending_removals = []

    def _on_player_goal(self, player: Player):
        self._handle_won()

    def _handle_won(self):
        self.wins += 1
        self.player.reset()
        self.enemies = []
        self._pending_removals = []
        logger.info("Game won (wins=%d)", self.wins)

    def _handle_lost(self):
        self.losses += 1
        self.player.reset()
        if self.clear_enemies_on_lose:
            self.enemies = []
            self._pending_removals = []
        logger.info("Game lost (losses=%d)", self.losses)


# ----------------------------- Rendering -----------------------------

def _draw_enemy_bug(surf: pygame.Surface, x: float, y: float):
    # Body sits in the row band, below the half-block sprite offset.
    top = int(y + SPRITE_Y_OFFSET + ROW_DRAW_OFFSET + 14)
    left = int(x + 4)
    w, h = BLOCK_WIDTH - 8, BLOCK_HEIGHT - 30

    shadow = pygame.Surface((w, 12), pygame.SRCALPHA)
    pygame.draw.ellipse(shadow, COL_SHADOW, shadow.get_rect())
    surf.blit(shadow, (left, top + h - 6))

    body = pygame.Rect(left, top, w, h)
    pygame.draw.ellipse(surf, COL_BUG, body)
    pygame.draw.line(surf, COL_BUG_DARK, (body.x + 14, body.centery), (body.right - 26, body.centery), 2)

    # Head faces right, the direction of travel.
    head = (body.right - 10, body.centery)
    pygame.draw.circle(surf, COL_BUG_DARK, head, 14)
    pygame.draw.circle(surf, (255, 255, 255), (head[0] + 4, head[1] - 5), 4)
    pygame.draw.circle(surf, COL_EYE, (head[0] + 5, head[1] - 5), 2)


def _draw_char_boy(surf: pygame.Surface, x: float, y: float):
    cx = int(x + BLOCK_WIDTH // 2)
    top = int(y + SPRITE_Y_OFFSET + ROW_DRAW_OFFSET + 4)

    shadow = pygame.Surface((50, 12), pygame.SRCALPHA)
    pygame.draw.ellipse(shadow, COL_SHADOW, shadow.get_rect())
    surf.blit(shadow, (cx - 25, top + 66))

    # Shirt
    pygame.draw.rect(surf, COL_BOY_SHIRT, (cx - 16, top + 34, 32, 30), border_radius=8)
    # Head and hair
    pygame.draw.circle(surf, COL_BOY_SKIN, (cx, top + 20), 18)
    pygame.draw.rect(surf, COL_BOY_HAIR, (cx - 18, top + 2, 36, 10), border_radius=6)
    # Eyes
    pygame.draw.circle(surf, COL_EYE, (cx - 6, top + 20), 3)
    pygame.draw.circle(surf, COL_EYE, (cx + 6, top + 20), 3)


SPRITES = {
    Enemy.sprite: _draw_enemy_bug,
    "char-boy": _draw_char_boy,
}


def draw_sprite(surf: pygame.Surface, sprite_id: str, x: float, y: float):
    SPRITES[sprite_id](surf, x, y)


def draw_background(surf: pygame.Surface):
    for row in range(NUM_ROWS):
        if row == 0:
            base, accent = COL_WATER, COL_WATER_LIGHT
        elif row <= NUM_ENEMY_LANES:
            base, accent = COL_STONE, COL_STONE_DARK
        else:
            base, accent = COL_GRASS, COL_GRASS_DARK

        y = row * BLOCK_HEIGHT + ROW_DRAW_OFFSET
        for col in range(NUM_COLS):
            tile = pygame.Rect(col * BLOCK_WIDTH, y, BLOCK_WIDTH, BLOCK_HEIGHT)
            pygame.draw.rect(surf, base, tile)
            pygame.draw.rect(surf, accent, tile, width=2)


# ----------------------------- Game -----------------------------

class Game:
    def __init__(self, session: Optional[GameSession] = None, fps: int = FPS,
                 show_hitboxes: bool = False):
        pygame.init()
        pygame.display.set_caption("Frogger Arcade")
        self.screen = pygame.display.set_mode((CANVAS_WIDTH, CANVAS_HEIGHT))
        self.clock = pygame.time.Clock()

        self.font = pygame.font.SysFont("consolas", 22)
        self.font_small = pygame.font.SysFont("consolas", 16)

        self.session = session if session is not None else GameSession()
        self.fps = fps
        self.show_hitboxes = show_hitboxes
        self.running = False

    def start_spawning(self):
        # Spawn right away, then once per period.
        self.session.spawn_enemy()
        pygame.time.set_timer(SPAWN_EVENT, self.session.spawn_period_ms)
        logger.info("Spawning enemies every %d ms", self.session.spawn_period_ms)

    def run(self):
        self.running = True
        self.start_spawning()
        try:
            while self.running:
                dt = self.clock.tick(self.fps) / 1000.0

                self._handle_events()
                self._update(dt)
                self._draw()
        finally:
            pygame.time.set_timer(SPAWN_EVENT, 0)
            pygame.quit()

    def _handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._quit()

            elif event.type == SPAWN_EVENT:
                self.session.spawn_enemy()

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self._quit()
                elif event.key == pygame.K_r:
                    self.session.reset()
                elif event.key == pygame.K_h:
                    self.show_hitboxes = not self.show_hitboxes

            elif event.type == pygame.KEYUP:
                self.session.player.handle_input(ALLOWED_KEYS.get(event.key))

    def _update(self, dt: float):
        self.session.tick(dt)

    def _draw(self):
        self.screen.fill(COL_BG)

        draw_background(self.screen)

        for enemy in self.session.enemies:
            enemy.draw(self.screen)
        self.session.player.draw(self.screen)

        if self.show_hitboxes:
            self._draw_hitboxes()

        self._draw_ui()

        pygame.display.flip()

    def _draw_hitboxes(self):
        pygame.draw.rect(self.screen, COL_HITBOX, self.session.player.bounding_box.to_rect(), width=1)
        for enemy in self.session.enemies:
            pygame.draw.rect(self.screen, COL_HITBOX, enemy.bounding_box.to_rect(), width=1)

    def _draw_ui(self):
        hud_y = NUM_ROWS * BLOCK_HEIGHT + ROW_DRAW_OFFSET + 6

        wins_txt = self.font.render(f"WINS {self.session.wins}", True, COL_WIN)
        losses_txt = self.font.render(f"LOSSES {self.session.losses}", True, COL_LOSE)
        self.screen.blit(wins_txt, (16, hud_y))
        self.screen.blit(losses_txt, (CANVAS_WIDTH - losses_txt.get_width() - 16, hud_y))

        controls_txt = self.font_small.render("Arrows Move  |  R Restart  |  H Hitboxes  |  ESC Quit",
                                              True, COL_TEXT)
        self.screen.blit(controls_txt, ((CANVAS_WIDTH - controls_txt.get_width()) // 2, CANVAS_HEIGHT - 22))

    def _quit(self):
        self.running = False


# ----------------------------- Entry point -----------------------------

def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Frogger Arcade")
    parser.add_argument('--spawn-rate', type=float, default=ENEMY_SPAWN_RATE, help='Enemies spawned per second')
    parser.add_argument('--seed', type=int, default=None, help='Seed for lane and speed randomness')
    parser.add_argument('--fps', type=int, default=FPS, help='Frame rate cap')
    parser.add_argument('--clear-on-lose', action='store_true', help='Clear all enemies when the player is hit')
    parser.add_argument('--show-hitboxes', action='store_true', help='Outline collision areas')
    parser.add_argument('--debug', action='store_true', help='Verbose logging')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.debug)

    session = GameSession(
        spawn_rate=args.spawn_rate,
        rng=random.Random(args.seed),
        clear_enemies_on_lose=args.clear_on_lose,
    )
    Game(session=session, fps=args.fps, show_hitboxes=args.show_hitboxes).run()


if __name__ == "__main__":
    main()
