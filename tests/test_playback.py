import pytest

from gridpath.app.playback import Frame, Playback
from gridpath.core.search import search
from gridpath.core.types import Grid, SearchResult

S, G = (0, 0), (0, 4)


def make_result():
    return SearchResult(algo="test",
                        visited=[S, (1, 0), (1, 1), (0, 1), G],
                        path=[S, (0, 1), G],
                        found=True)


def test_frames_skip_start_and_goal():
    pb = Playback(make_result(), S, G)
    assert pb.frames() == [
        Frame("visited", (1, 0)),
        Frame("visited", (1, 1)),
        Frame("visited", (0, 1)),
        Frame("path", (0, 1)),
    ]


def test_advance_releases_on_schedule():
    pb = Playback(make_result(), S, G, visit_delay=1.0, path_delay=2.0)
    assert pb.advance(10.0) == [Frame("visited", (1, 0))]
    assert pb.advance(10.5) == []
    assert pb.advance(11.0) == [Frame("visited", (1, 1))]
    assert pb.advance(13.5) == [Frame("visited", (0, 1)), Frame("path", (0, 1))]
    assert pb.done
    assert pb.advance(100.0) == []


def test_speed_scales_delays():
    pb = Playback(make_result(), S, G, visit_delay=1.0, path_delay=2.0, speed=2.0)
    assert len(pb.advance(0.0)) == 1
    assert len(pb.advance(0.5)) == 1
    assert len(pb.advance(1.0)) == 1
    assert len(pb.advance(1.5)) == 1
    assert pb.done


def test_zero_delay_releases_everything_at_once():
    pb = Playback(make_result(), S, G, visit_delay=0, path_delay=0)
    assert pb.advance(3.0) == pb.frames()
    assert pb.done


def test_finish_and_progress():
    pb = Playback(make_result(), S, G, visit_delay=1.0)
    assert pb.progress == 0.0
    pb.advance(0.0)
    assert pb.progress == 0.25
    assert pb.finish() == pb.frames()[1:]
    assert pb.done
    assert pb.progress == 1.0


def test_nothing_to_play_for_unreachable_goal():
    res = SearchResult(algo="test", visited=[S], path=[S], found=False)
    pb = Playback(res, S, G)
    assert pb.frames() == []
    assert pb.done
    assert pb.progress == 1.0


def test_bad_speed_and_delay():
    with pytest.raises(ValueError):
        Playback(make_result(), S, G, speed=0)
    with pytest.raises(ValueError):
        Playback(make_result(), S, G, visit_delay=-1)
    pb = Playback(make_result(), S, G)
    with pytest.raises(ValueError):
        pb.speed = -2


def test_blocking_play_with_fake_clock():
    now = [0.0]
    slept = []

    def sleep(dt):
        slept.append(dt)
        now[0] += dt

    seen = []
    pb = Playback(make_result(), S, G, visit_delay=1.0, path_delay=2.0)
    pb.play(seen.append, sleep=sleep, clock=lambda: now[0])
    assert seen == pb.frames()
    assert slept == [1.0, 1.0, 1.0]


def test_plays_a_real_search():
    g = Grid.empty(5, 5)
    res = search(g, algorithm="astar")
    pb = Playback(res, g.start, g.goal, visit_delay=0, path_delay=0)
    frames = pb.advance(0.0)
    path_cells = [f.cell for f in frames if f.kind == "path"]
    assert path_cells == res.path[1:-1]
    assert [f.cell for f in frames if f.kind == "visited"] == res.visited[1:-1]
