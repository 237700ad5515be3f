import pytest

from bubble_shooter import Bubble, Intents
from bubble_shooter.movement import MovementStep

LEFT = Intents(move_left=True)
RIGHT = Intents(move_right=True)
FIRE = Intents(fire=True)
IDLE = Intents()


@pytest.fixture
def movement(config):
    return MovementStep(config)


@pytest.mark.parametrize("intents, expected", [(LEFT, 0.0), (RIGHT, 860.0)])
def test_aircraft_is_clamped_to_the_arena(movement, store, intents, expected):
    for _ in range(200):
        movement.step(store, intents)
        assert 0.0 <= store.aircraft.x <= 860.0
    assert store.aircraft.x == expected


def test_aircraft_moves_one_step_per_frame(movement, store):
    movement.step(store, LEFT)
    assert store.aircraft.x == 423
    movement.step(store, RIGHT)
    movement.step(store, RIGHT)
    assert store.aircraft.x == 437


def test_opposite_directions_cancel(movement, store):
    movement.step(store, Intents(move_left=True, move_right=True))
    assert store.aircraft.x == 430


def test_aircraft_y_never_changes(movement, store):
    for intents in (LEFT, RIGHT, FIRE, IDLE):
        movement.step(store, intents)
    assert store.aircraft.y == 550


def test_bullet_spawns_at_the_nose(movement, store):
    report = movement.step(store, FIRE)

    assert report.fired
    (bullet,) = store.bullets
    assert bullet.x == 430 + 20 - 4
    # Spawned at y - 8, then moved once this frame
    assert bullet.y == 550 - 8 - 12


def test_fire_within_cooldown_is_ignored(movement, store):
    movement.step(store, FIRE)
    for _ in range(13):
        movement.step(store, IDLE)
    # 14 frames after the first shot
    report = movement.step(store, FIRE)

    assert not report.fired
    assert store.num_bullets == 1


def test_holding_fire_shoots_every_fifteen_frames(movement, store):
    fired_on = [i for i in range(46) if movement.step(store, FIRE).fired]
    assert fired_on == [0, 15, 30, 45]


def test_bullet_is_removed_once_it_leaves_the_top(movement, store):
    movement.step(store, FIRE)
    # Nose starts at 542 and rises 12 per frame: y + 16 <= 0 first holds on frame 47
    for _ in range(45):
        movement.step(store, IDLE)
    assert store.num_bullets == 1
    assert store.bullets[0].y + store.bullets[0].height > 0

    report = movement.step(store, IDLE)
    assert store.num_bullets == 0
    assert report.bullets_expired == 1


def test_bubbles_fall_by_their_own_speed(movement, store):
    slow = store.add_bubble(Bubble(x=100, y=0, radius=15, speed=1.0))
    fast = store.add_bubble(Bubble(x=200, y=0, radius=15, speed=2.5))

    previous = (slow.y, fast.y)
    for _ in range(10):
        movement.step(store, IDLE)
        assert slow.y > previous[0] and fast.y > previous[1]
        previous = (slow.y, fast.y)

    assert slow.y == pytest.approx(10.0)
    assert fast.y == pytest.approx(25.0)


def test_bubble_is_removed_once_fully_below_the_bottom(movement, store):
    store.add_bubble(Bubble(x=100, y=580, radius=20, speed=2.0))
    for _ in range(19):
        movement.step(store, IDLE)
    assert store.num_bubbles == 1

    report = movement.step(store, IDLE)
    assert store.num_bubbles == 0
    assert report.bubbles_escaped == 1
