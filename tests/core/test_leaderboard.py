"""Leaderboard Ranking: verifies ordering, per-owner dedup and exclusion rules.

Invariants:
    - Sorted by distance_covered descending, ties kept in input order
    - One record per owner: the best run that has a duration
    - Empty-duration runs never appear
    - Ranking is idempotent and never mutates its input
"""

from types import SimpleNamespace

from stridefund.core.leaderboard import rank_runners, top_runners


def _runner(name, owner, distance, duration="00:30:00"):
    return SimpleNamespace(
        id=name, owner_id=owner, distance_covered=distance, duration=duration,
    )


def test_empty_input_gives_empty_output():
    assert rank_runners([]) == []


def test_sorted_by_distance_descending():
    runners = [_runner("a", "u1", 3.0), _runner("b", "u2", 9.0), _runner("c", "u3", 5.5)]
    assert [r.id for r in rank_runners(runners)] == ["b", "c", "a"]


def test_ties_keep_input_order():
    runners = [_runner("first", "u1", 5.0), _runner("second", "u2", 5.0), _runner("third", "u3", 5.0)]
    assert [r.id for r in rank_runners(runners)] == ["first", "second", "third"]


def test_one_record_per_owner_keeps_longest_run():
    runners = [_runner("short", "u1", 2.0), _runner("long", "u1", 12.0), _runner("other", "u2", 7.0)]
    ranked = rank_runners(runners)
    assert [r.id for r in ranked] == ["long", "other"]


def test_owner_tie_keeps_earlier_record():
    runners = [_runner("early", "u1", 4.0), _runner("late", "u1", 4.0)]
    assert [r.id for r in rank_runners(runners)] == ["early"]


def test_empty_duration_is_excluded():
    runners = [_runner("done", "u1", 3.0), _runner("unfinished", "u2", 20.0, duration="")]
    assert [r.id for r in rank_runners(runners)] == ["done"]


def test_none_duration_is_excluded():
    assert rank_runners([_runner("x", "u1", 3.0, duration=None)]) == []


def test_owner_best_unfinished_run_falls_back_to_next_finished():
    runners = [
        _runner("unfinished", "u1", 30.0, duration=""),
        _runner("finished", "u1", 10.0),
    ]
    assert [r.id for r in rank_runners(runners)] == ["finished"]


def test_all_durations_empty_gives_empty_output():
    runners = [_runner("a", "u1", 1.0, ""), _runner("b", "u2", 2.0, "")]
    assert rank_runners(runners) == []


def test_single_owner_yields_only_top_record():
    runners = [_runner(str(i), "solo", float(i)) for i in range(1, 6)]
    assert [r.id for r in rank_runners(runners)] == ["5"]


def test_ranking_is_idempotent():
    runners = [_runner("a", "u1", 3.0), _runner("b", "u2", 3.0), _runner("c", "u1", 8.0)]
    assert rank_runners(runners) == rank_runners(runners)
    assert rank_runners(rank_runners(runners)) == rank_runners(runners)


def test_input_is_not_mutated():
    runners = [_runner("a", "u1", 1.0), _runner("b", "u2", 2.0)]
    rank_runners(runners)
    assert [r.id for r in runners] == ["a", "b"]


def test_accepts_any_iterable():
    gen = (_runner(n, n, d) for n, d in (("a", 1.0), ("b", 2.0)))
    assert [r.id for r in rank_runners(gen)] == ["b", "a"]


def test_top_runners_truncates_after_dedup():
    runners = [
        _runner("a1", "a", 10.0), _runner("a2", "a", 9.0),
        _runner("b1", "b", 8.0), _runner("c1", "c", 7.0),
    ]
    assert [r.id for r in top_runners(runners, 2)] == ["a1", "b1"]


def test_top_runners_without_limit_returns_everything():
    runners = [_runner("a", "u1", 1.0), _runner("b", "u2", 2.0)]
    assert len(top_runners(runners)) == 2


def test_top_runners_zero_limit():
    assert top_runners([_runner("a", "u1", 1.0)], 0) == []
