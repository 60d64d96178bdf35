# tests/test_conversation.py

from __future__ import annotations

from planner_bot.core.conversation import ConversationState, ConversationStateTracker


def test_default_state_is_absent() -> None:
    tracker = ConversationStateTracker()
    assert tracker.consume(1) is None
    assert len(tracker) == 0


def test_set_awaiting_description_then_peek() -> None:
    tracker = ConversationStateTracker()
    tracker.set_awaiting_description(1)

    assert tracker.consume(1) == ConversationState(awaiting_description=True)
    # Peeking has no side effect.
    assert tracker.consume(1) == ConversationState(awaiting_description=True)


def test_new_flow_overwrites_previous_state() -> None:
    tracker = ConversationStateTracker()
    tracker.set_awaiting_description(1)
    tracker.set_awaiting_done_id(1)

    st = tracker.consume(1)
    assert st is not None
    assert st.awaiting_done_id is True
    assert st.awaiting_description is False


def test_states_are_per_chat() -> None:
    tracker = ConversationStateTracker()
    tracker.set_awaiting_description(1)
    tracker.set_awaiting_done_id(2)

    tracker.clear(1)

    assert tracker.consume(1) is None
    assert tracker.consume(2) == ConversationState(awaiting_done_id=True)


def test_clear_unknown_chat_is_noop() -> None:
    tracker = ConversationStateTracker()
    tracker.clear(42)
    assert tracker.consume(42) is None


def test_consume_returns_a_copy() -> None:
    tracker = ConversationStateTracker()
    tracker.set_awaiting_description(1)

    st = tracker.consume(1)
    assert st is not None
    st.awaiting_description = False

    assert tracker.consume(1) == ConversationState(awaiting_description=True)
