"""Tests for the Enemy and Player game objects."""

import random

import pytest

from frogger import (
    BLOCK_HEIGHT,
    BLOCK_WIDTH,
    CANVAS_WIDTH,
    NUM_COLS,
    NUM_ROWS,
    Enemy,
    InvalidInputError,
    Player,
)


class TestEnemy:
    """Tests for Enemy motion and signalling."""

    def test_starts_off_screen_left(self):
        """New enemies start one block left of the canvas."""
        enemy = Enemy(0, 100)
        assert enemy.x == -BLOCK_WIDTH
        assert enemy.row == 1

    def test_moves_by_speed_times_dt(self):
        """Two one-second updates move the enemy 2 * speed pixels."""
        enemy = Enemy(1, 100)
        enemy.update(1.0)
        assert enemy.row == 2
        enemy.update(1.0)
        assert enemy.x == pytest.approx(-BLOCK_WIDTH + 200)
        assert enemy.row == 2

    def test_position_strictly_increases(self):
        """x only moves right."""
        enemy = Enemy(2, 55.5)
        last = enemy.x
        for _ in range(20):
            enemy.update(1 / 60)
            assert enemy.x > last
            last = enemy.x

    def test_offscreen_signal(self):
        """Passing the canvas width calls the callback with the enemy."""
        signalled = []
        enemy = Enemy(0, 1000, on_offscreen=signalled.append)

        enemy.update(0.5)  # x = 399
        assert signalled == []

        enemy.update(0.2)  # x = 599
        assert enemy.x > CANVAS_WIDTH
        assert signalled == [enemy]

    def test_at_canvas_edge_is_not_offscreen(self):
        """Exactly at the canvas width is still on screen."""
        signalled = []
        enemy = Enemy(0, CANVAS_WIDTH + BLOCK_WIDTH, on_offscreen=signalled.append)
        enemy.update(1.0)
        assert enemy.x == CANVAS_WIDTH
        assert signalled == []

    def test_bounding_box(self):
        """The box spans one block from x and the full row height."""
        enemy = Enemy(1, 101)
        enemy.update(1.0)  # x = 0
        box = enemy.bounding_box
        assert (box.x.start, box.x.end) == (0, BLOCK_WIDTH)
        assert (box.y.start, box.y.end) == (2 * BLOCK_HEIGHT, 3 * BLOCK_HEIGHT - 1)

    @pytest.mark.parametrize("lane", [-1, 3])
    def test_invalid_lane(self, lane):
        """Lanes outside the road are rejected."""
        with pytest.raises(ValueError):
            Enemy(lane, 100)

    @pytest.mark.parametrize("speed", [0, -10])
    def test_invalid_speed(self, speed):
        """Speed must be positive."""
        with pytest.raises(ValueError):
            Enemy(0, speed)


class TestPlayer:
    """Tests for Player movement and signalling."""

    def test_start_position(self):
        """Players start bottom-middle."""
        player = Player()
        assert (player.x_block, player.y_block) == (2, 4)

    def test_moves_one_block(self):
        """Each direction moves one block."""
        player = Player()
        player.handle_input("up")
        assert (player.x_block, player.y_block) == (2, 3)
        player.handle_input("left")
        assert (player.x_block, player.y_block) == (1, 3)
        player.handle_input("right")
        player.handle_input("right")
        assert (player.x_block, player.y_block) == (3, 3)
        player.handle_input("down")
        assert (player.x_block, player.y_block) == (3, 4)

    def test_clamped_at_edges(self):
        """Moving past an edge is a no-op."""
        player = Player()
        for _ in range(10):
            player.handle_input("left")
            player.handle_input("down")
        assert (player.x_block, player.y_block) == (0, NUM_ROWS - 1)

        for _ in range(10):
            player.handle_input("right")
            player.handle_input("up")
        assert (player.x_block, player.y_block) == (NUM_COLS - 1, 0)

    def test_random_walk_stays_in_grid(self):
        """Any sequence of valid inputs keeps the player on the grid."""
        rng = random.Random(42)
        player = Player()
        for _ in range(500):
            player.handle_input(rng.choice(["up", "down", "left", "right"]))
            assert 0 <= player.x_block < NUM_COLS
            assert 0 <= player.y_block < NUM_ROWS

    @pytest.mark.parametrize("direction", [None, ""])
    def test_no_input_is_noop(self, direction):
        """A missing direction leaves the player where they are."""
        player = Player()
        player.handle_input(direction)
        assert (player.x_block, player.y_block) == (2, 4)

    @pytest.mark.parametrize("direction", ["jump", "UP", "north"])
    def test_unknown_direction_raises(self, direction):
        """Unknown tokens raise InvalidInputError and do not move."""
        player = Player()
        with pytest.raises(InvalidInputError, match=direction):
            player.handle_input(direction)
        assert (player.x_block, player.y_block) == (2, 4)

    def test_invalid_input_is_value_error(self):
        """InvalidInputError can be caught as a ValueError."""
        assert issubclass(InvalidInputError, ValueError)

    def test_goal_signal_only_on_row_zero(self):
        """update() signals the goal only when standing on row 0."""
        reached = []
        player = Player(on_goal=reached.append)
        player.update(0.016)
        assert reached == []

        for _ in range(4):
            player.handle_input("up")
        player.update(0.016)
        assert reached == [player]

    def test_reset(self):
        """reset() returns to the start block."""
        player = Player()
        player.handle_input("up")
        player.handle_input("right")
        player.reset()
        assert (player.x_block, player.y_block) == (2, 4)

    def test_bounding_box_is_inset(self):
        """The box is a quarter block narrower on each side."""
        box = Player().bounding_box
        assert box.x.start == pytest.approx(2 * BLOCK_WIDTH + BLOCK_WIDTH / 4)
        assert box.x.end == pytest.approx(3 * BLOCK_WIDTH - BLOCK_WIDTH / 4)
        assert (box.y.start, box.y.end) == (4 * BLOCK_HEIGHT, 5 * BLOCK_HEIGHT - 1)
