from morsetree import GrowthAutomaton, History, Snapshot


def test_empty_history_pops_none() -> None:
    history = History()
    assert not history
    assert len(history) == 0
    assert history.pop() is None
    assert history.peek() is None


def test_lifo_order() -> None:
    history = History()
    first = Snapshot(segments=(), tips=(), symbols=(), typed_text='A')
    second = Snapshot(segments=(), tips=(), symbols=('.',), typed_text='AB')
    history.push(first)
    history.push(second)
    assert len(history) == 2
    assert history.pop() is second
    assert history.pop() is first
    assert history.pop() is None


def test_clear() -> None:
    history = History()
    history.push(Snapshot(segments=(), tips=(), symbols=(), typed_text=''))
    history.clear()
    assert len(history) == 0


def test_snapshot_is_independent_of_later_growth(automaton: GrowthAutomaton) -> None:
    automaton.emit_character('E')
    automaton.emit_character('T')
    stored = automaton.history.peek()
    assert stored.symbols == ('.', '|')
    assert len(stored.segments) == 1

    automaton.drain()
    assert stored.symbols == ('.', '|')
    assert len(stored.segments) == 1
    assert stored.tips == (0,)
    assert stored.typed_text == 'E'


def test_snapshots_oldest_first() -> None:
    automaton = GrowthAutomaton()
    automaton.type_text('AB')
    first, second = automaton.history.snapshots
    assert first.typed_text == ''
    assert second.typed_text == 'A'
    assert automaton.history.pop() is second
    assert automaton.history.snapshots == (first,)
