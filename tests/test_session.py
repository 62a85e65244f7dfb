import pytest
from warlord.engine import PatternParseError, generate_feedback
from warlord.session import (
    COMPLETED, GAME_MODE, LOST, WON, GuessCommitted, GuessUndone, SessionCompleted,
    SessionStarted, SolverSession, play_game, run_batch,
)

WORDS = ["dusky", "dusty", "dumpy", "daisy"]


def test_no_suggestions_before_first_guess():
    s = SolverSession(WORDS, ["dusty"], 5)
    assert s.suggestions() == []
    assert s.candidates() == WORDS


def test_submit_records_pool_and_optimal_choice():
    s = SolverSession(WORDS, ["dusty"], 5)
    rec = s.submit("daisy", "GXXYG")

    assert rec.pool_size_before == 4
    assert rec.pool_size_after == 2
    assert rec.optimal_word == "dusty"
    assert rec.optimal_score == 25
    assert rec.deviation == -12
    assert not rec.was_optimal
    assert rec.entropy == pytest.approx(1.0)

    assert s.candidates() == ["dusky", "dusty"]
    assert s.suggestions() == [("dusty", 19), ("dusky", 9)]


def test_contradictory_guesses_leave_empty_pool():
    s = SolverSession(WORDS, (), 5)
    s.submit("daisy", "GXXYG")
    rec = s.submit("dusty", "GGXGG")
    assert rec.pool_size_after == 0
    assert rec.entropy == 0.0
    assert s.candidates() == [] and s.suggestions() == []
    assert not s.finished


def test_undo_restores_previous_pool_and_entropy_history():
    s = SolverSession(WORDS, (), 5)
    s.submit("daisy", "GXXYG")
    after_first = s.candidates()
    s.submit("dusty", "GGXGG")

    g = s.undo()
    assert g.word == "dusty"
    assert s.candidates() == after_first
    assert len(s.records) == 1
    assert s.entropy_history == [pytest.approx(1.0)]

    s.undo()
    assert s.undo() is None
    assert s.candidates() == WORDS
    assert s.entropy_history == []


def test_bad_pattern_leaves_session_untouched():
    s = SolverSession(WORDS, (), 5)
    with pytest.raises(PatternParseError) as ei:
        s.submit("daisy", "GXQYG")
    assert ei.value.char == "Q"
    with pytest.raises(ValueError):
        s.submit("daisy", "GXX")
    assert len(s.guesses) == 0
    assert len(s.events) == 1
    assert s.candidates() == WORDS


def test_solving_completes_session_and_emits_events():
    s = SolverSession(WORDS, (), 5)
    s.submit("daisy", "GXXYG")
    s.submit("dusky", generate_feedback("dusky", "dusky"))
    assert s.outcome == COMPLETED
    assert [type(e) for e in s.events] == [SessionStarted, GuessCommitted, GuessCommitted, SessionCompleted]

    s.complete()  # already finished: no second completion event
    assert len(s.events) == 4


def test_undo_event_and_reopen():
    s = SolverSession(WORDS, (), 5)
    s.submit("dusky", "GGGGG")
    s.undo()
    assert s.outcome is None
    assert isinstance(s.events[-1], GuessUndone)


def test_analyze_bundle():
    s = SolverSession(WORDS, (), 5)
    s.submit("daisy", "GXXYG")
    a = s.analyze()
    assert a.pool.total_remaining == 2
    assert a.pool.eliminated_percentage == pytest.approx(50.0)
    assert a.letters.max_frequency == 2
    assert a.positions.solved_positions[:3] == ["d", "u", "s"]
    assert a.constraints.excluded == ["a", "i"]


def test_play_game_solves_small_pool():
    words = ["crane", "raise", "stare", "trace", "cared"]
    r = play_game("crane", dictionary=words, solutions=words, N=5, seed=42)
    assert r["success"] is True
    assert r["history"][-1] == ("crane", "GGGGG")
    assert r["guesses"] == len(r["records"]) <= 6
    assert isinstance(r["events"][0], SessionStarted) and r["events"][0].mode == GAME_MODE
    assert r["events"][-1].outcome == WON


def test_play_game_target_outside_dictionary_is_lost():
    r = play_game("zzzzz", dictionary=["crane", "raise"], N=5)
    assert r["success"] is False
    assert r["events"][-1].outcome == LOST


def test_play_game_enforces_turn_budget():
    with pytest.raises(ValueError):
        play_game("crane", dictionary=["crane"], N=5, max_turns=7)


def test_run_batch_sample():
    words = ["crane", "raise", "stare", "trace", "cared"]
    out = run_batch(words, dictionary=words, solutions=words, N=5, seed=1, sample=2)
    assert [r["answer"] for r in out] == ["crane", "raise"]
    assert all(r["success"] for r in out)


def test_pool_is_ranked_once_per_turn(monkeypatch):
    import warlord.session.core as core
    calls = []
    real = core.score_and_sort

    def counting(*args, **kwargs):
        calls.append(1)
        return real(*args, **kwargs)

    monkeypatch.setattr(core, "score_and_sort", counting)
    words = ["crane", "raise", "stare", "trace", "cared"]
    r = play_game("cared", dictionary=words, solutions=words, N=5, seed=7)
    assert r["success"] is True
    assert len(calls) == r["guesses"]


def test_ranking_is_reused_until_the_pool_changes():
    s = SolverSession(WORDS, ["dusty"], 5)
    s.submit("daisy", "GXXYG")
    assert s.ranking() is s.ranking()
    assert s.suggestions(1) == [("dusty", 19)]
    s.undo()
    assert [w for w, _ in s.ranking()] == ["dusty", "dusky", "dumpy", "daisy"]


def test_word_outside_pool_can_beat_the_optimal_score():
    s = SolverSession(["aaaab", "aaaac"], (), 5)
    rec = s.submit("abcxx", "YXXXX")
    assert rec.optimal_score == 3
    assert rec.deviation == 1
    assert rec.was_optimal
