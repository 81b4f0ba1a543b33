from terminvaders.frame import new_frame
from terminvaders.score import Score


def _top_row(frame, width):
    return "".join(frame[x][0] for x in range(width))


def test_new_score_draws_zero():
    score = Score()
    frame = new_frame()
    score.draw(frame)
    assert _top_row(frame, len("SCORE: 0000")) == "SCORE: 0000"


def test_add_points_accumulates():
    score = Score()
    score.add_points(3)
    score.add_points(2)
    assert score.count == 3 + 2


def test_draw_pads_with_zeros():
    score = Score()
    score.add_points(5)
    frame = new_frame()
    score.draw(frame)
    assert _top_row(frame, len("SCORE: 0005")) == "SCORE: 0005"