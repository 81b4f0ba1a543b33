from datetime import timedelta

from terminvaders.frame import NUM_COLS, NUM_ROWS, new_frame
from terminvaders.invaders import Invader, Invaders

FULL_STEP = timedelta(milliseconds=2000)


def test_new_army_layout():
    invaders = Invaders()
    assert invaders.army
    assert invaders.total_count == len(invaders.army)
    for invader in invaders.army:
        assert 1 < invader.x < NUM_COLS - 2
        assert 0 < invader.y < 9
        assert invader.x % 2 == 0 and invader.y % 2 == 0


def test_update_before_timer_does_nothing():
    invaders = Invaders()
    before = [(i.x, i.y) for i in invaders.army]
    assert invaders.update(timedelta(milliseconds=10)) is False
    assert [(i.x, i.y) for i in invaders.army] == before


def test_update_moves_right():
    invaders = Invaders()
    before = [(i.x, i.y) for i in invaders.army]
    assert invaders.update(FULL_STEP) is True
    assert [(i.x, i.y) for i in invaders.army] == [(x + 1, y) for x, y in before]


def test_army_drops_and_reverses_at_right_edge():
    invaders = Invaders()
    while max(i.x for i in invaders.army) < NUM_COLS - 1:
        invaders.update(FULL_STEP)
    before = [(i.x, i.y) for i in invaders.army]
    assert invaders.update(FULL_STEP) is True
    assert [(i.x, i.y) for i in invaders.army] == [(x, y + 1) for x, y in before]
    assert invaders.direction == -1
    assert invaders.move_timer.duration < FULL_STEP
    invaders.update(invaders.move_timer.duration)
    assert [(i.x, i.y) for i in invaders.army] == [(x - 1, y + 1) for x, y in before]


def test_speed_never_drops_below_minimum():
    invaders = Invaders()
    invaders.army = [Invader(NUM_COLS - 1, 1)]
    for _ in range(20):
        invaders.direction = 1
        invaders.army[0].x = NUM_COLS - 1
        invaders.update(invaders.move_timer.duration)
    assert invaders.move_timer.duration == timedelta(milliseconds=250)


def test_kill_invader_removes_and_scores():
    invaders = Invaders()
    target = invaders.army[0]
    count = len(invaders.army)
    assert invaders.kill_invader_at(target.x, target.y) == 1
    assert len(invaders.army) == count - 1
    assert invaders.kill_invader_at(target.x, target.y) == 0
    assert invaders.total_count == count


def test_kill_at_empty_cell_scores_nothing():
    invaders = Invaders()
    assert invaders.kill_invader_at(0, 0) == 0


def test_all_killed():
    invaders = Invaders()
    assert invaders.all_killed() is False
    for invader in list(invaders.army):
        invaders.kill_invader_at(invader.x, invader.y)
    assert invaders.all_killed() is True


def test_reached_bottom():
    invaders = Invaders()
    assert invaders.reached_bottom() is False
    invaders.army[0].y = NUM_ROWS - 1
    assert invaders.reached_bottom() is True


def test_draw_glyph_depends_on_timer():
    invaders = Invaders()
    first = invaders.army[0]
    frame = new_frame()
    invaders.draw(frame)
    assert frame[first.x][first.y] == "x"
    invaders.update(timedelta(milliseconds=1500))
    frame = new_frame()
    invaders.draw(frame)
    assert frame[first.x][first.y] == "+"
    drawn = sum(cell in "x+" for column in frame for cell in column)
    assert drawn == len(invaders.army)